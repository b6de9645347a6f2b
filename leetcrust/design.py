"""Small data-structure designs: a task manager and a spreadsheet."""

from __future__ import annotations

import heapq
import string
from typing import Iterable, Sequence

__all__ = ["TaskManager", "Spreadsheet"]


class TaskManager:
    """Tracks user tasks and executes the one with the highest priority first.

    Ties in priority go to the task with the larger id.
    """

    def __init__(self, tasks: Iterable[Sequence[int]]) -> None:
        self._tasks: dict[int, tuple[int, int]] = {}
        self._heap: list[tuple[int, int]] = []
        for user_id, task_id, priority in tasks:
            self.add(user_id, task_id, priority)

    def add(self, user_id: int, task_id: int, priority: int) -> None:
        """Register a task for a user with the given priority."""
        self._tasks[task_id] = (user_id, priority)
        heapq.heappush(self._heap, (-priority, -task_id))

    def edit(self, task_id: int, new_priority: int) -> None:
        """Change the priority of an existing task; raises KeyError if unknown."""
        user_id, _ = self._tasks[task_id]
        self.add(user_id, task_id, new_priority)

    def rmv(self, task_id: int) -> None:
        """Remove an existing task; raises KeyError if unknown.

        Stale heap entries for the task are discarded lazily by ``exec_top``.
        """
        if task_id not in self._tasks:
            raise KeyError(f"unknown task id: {task_id}")
        self._tasks.pop(task_id)

    def exec_top(self) -> int:
        """Execute and remove the top task, returning its user id, or -1 if none is left."""
        while self._heap:
            neg_priority, neg_task_id = heapq.heappop(self._heap)
            task_id = -neg_task_id
            entry = self._tasks.get(task_id)
            if entry is not None and entry[1] == -neg_priority:
                del self._tasks[task_id]
                return entry[0]
        return -1


class Spreadsheet:
    """A grid of 26 columns (A to Z) and rows numbered 0 to ``rows``, all starting at 0."""

    def __init__(self, rows: int) -> None:
        self._rows = rows
        self._cells: dict[tuple[int, int], int] = {}

    def _locate(self, cell: str) -> tuple[int, int]:
        if len(cell) < 2 or cell[0] not in string.ascii_uppercase:
            raise ValueError(f"invalid cell reference: {cell!r}")
        try:
            row = int(cell[1:])
        except ValueError:
            raise ValueError(f"invalid cell reference: {cell!r}") from None
        if not 0 <= row <= self._rows:
            raise ValueError(f"row out of range in cell reference: {cell!r}")
        return row, ord(cell[0]) - ord("A")

    def set_cell(self, cell: str, value: int) -> None:
        """Store ``value`` in the cell named like ``"B2"``."""
        self._cells[self._locate(cell)] = value

    def reset_cell(self, cell: str) -> None:
        """Set the cell back to 0."""
        self.set_cell(cell, 0)

    def get_value(self, formula: str) -> int:
        """Evaluate a formula of the form ``=X+Y`` where each term is a number or a cell."""
        total = 0
        for term in formula[1:].split("+"):
            if term[:1].isdigit():
                total += int(term)
            else:
                total += self._cells.get(self._locate(term), 0)
        return total