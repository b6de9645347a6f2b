"""Solutions to algorithm puzzles, grouped by theme: trees, graphs, intervals,
grids, strings, words, geometry, bits, arrays, counting and small designs."""

__version__ = "0.1.0"