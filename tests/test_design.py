import pytest

from leetcrust.design import Spreadsheet, TaskManager


def test_task_manager_example():
    manager = TaskManager([[1, 101, 10], [2, 102, 20], [3, 103, 15]])
    manager.add(4, 104, 5)
    manager.edit(102, 8)
    assert manager.exec_top() == 3
    manager.rmv(101)
    manager.add(5, 105, 15)
    assert manager.exec_top() == 5


def test_task_manager_empty_returns_minus_one():
    manager = TaskManager([[1, 7, 3]])
    assert manager.exec_top() == 1
    assert manager.exec_top() == -1


def test_task_manager_tie_goes_to_larger_task_id():
    manager = TaskManager([[1, 1, 5], [2, 2, 5]])
    assert manager.exec_top() == 2
    assert manager.exec_top() == 1


def test_task_manager_removed_task_is_skipped():
    manager = TaskManager([[1, 10, 50], [2, 20, 1]])
    manager.rmv(10)
    assert manager.exec_top() == 2


def test_task_manager_unknown_task():
    manager = TaskManager([])
    with pytest.raises(KeyError):
        manager.rmv(42)
    with pytest.raises(KeyError):
        manager.edit(42, 1)


def test_spreadsheet_example():
    sheet = Spreadsheet(3)
    assert sheet.get_value("=5+7") == 12
    sheet.set_cell("A1", 10)
    assert sheet.get_value("=A1+6") == 16
    sheet.set_cell("B2", 15)
    assert sheet.get_value("=A1+B2") == 25
    sheet.reset_cell("A1")
    assert sheet.get_value("=A1+B2") == 15


def test_spreadsheet_unset_cell_is_zero():
    sheet = Spreadsheet(2)
    assert sheet.get_value("=Z2+C0") == 0


@pytest.mark.parametrize("cell", ["a1", "A", "A9", "1A", "AX"])
def test_spreadsheet_invalid_cell(cell):
    sheet = Spreadsheet(3)
    with pytest.raises(ValueError):
        sheet.set_cell(cell, 1)