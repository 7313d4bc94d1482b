import pytest
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

from tictactoe.config import ACCENT_COLOR
from tictactoe.ui.board_widget import BoardWidget


@pytest.fixture
def board(qtbot, controller):
    widget = BoardWidget(controller)
    qtbot.addWidget(widget)
    widget.resize(300, 300)
    widget.show()
    qtbot.waitExposed(widget)
    return widget


def click_cell(qtbot, widget, index):
    center = widget.cell_rect(index).center().toPoint()
    qtbot.mouseClick(widget, Qt.LeftButton, pos=center)


def test_cell_at_maps_row_major(board):
    assert board.cell_at(10, 10) == 0
    assert board.cell_at(150, 10) == 1
    assert board.cell_at(10, 150) == 3
    assert board.cell_at(150, 150) == 4
    assert board.cell_at(299, 299) == 8


def test_cell_at_outside_grid(qtbot, controller):
    widget = BoardWidget(controller)
    qtbot.addWidget(widget)
    widget.resize(400, 300)
    # board is centred horizontally with 50px margins
    assert widget.cell_at(20, 150) is None
    assert widget.cell_at(60, 10) == 0
    assert widget.cell_at(360, 150) is None


def test_click_emits_cell_index(qtbot, board):
    with qtbot.waitSignal(board.cell_clicked, timeout=1000) as blocker:
        click_cell(qtbot, board, 5)
    assert blocker.args == [5]


def test_click_on_taken_cell_is_not_emitted(qtbot, board, controller):
    controller.apply_move(5)
    with qtbot.assertNotEmitted(board.cell_clicked):
        click_cell(qtbot, board, 5)


def test_click_after_game_over_is_not_emitted(qtbot, board, controller, play):
    play(controller, [0, 4, 1, 3, 2])
    with qtbot.assertNotEmitted(board.cell_clicked):
        click_cell(qtbot, board, 8)


def test_right_click_is_ignored(qtbot, board):
    with qtbot.assertNotEmitted(board.cell_clicked):
        center = board.cell_rect(0).center().toPoint()
        qtbot.mouseClick(board, Qt.RightButton, pos=center)


def test_number_keys_pick_cells(qtbot, board):
    with qtbot.waitSignal(board.cell_clicked, timeout=1000) as blocker:
        qtbot.keyClick(board, Qt.Key_9)
    assert blocker.args == [8]


def test_accessible_description_follows_board(qtbot, board, controller):
    controller.apply_move(0)
    desc = board.accessibleDescription().split("; ")
    assert desc[0] == "Cell 1: X"
    assert desc[1:] == ["Empty cell"] * 8


def pixel(widget, x, y):
    return widget.grab().toImage().pixelColor(x, y)


def test_open_cells_stay_white_mid_game(board, controller, play):
    play(controller, [0, 4])
    # empty cell 8
    assert pixel(board, 250, 250) == QColor("#ffffff")


def test_won_board_greys_out_other_cells(board, controller, play):
    play(controller, [0, 4, 1, 3, 2])
    # empty cell 8 is dimmed, winning cell 0 keeps the accent
    assert pixel(board, 250, 250) != QColor("#ffffff")
    assert pixel(board, 5, 5) == QColor(ACCENT_COLOR)


def test_drawn_board_greys_out(board, controller, play):
    play(controller, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    # corner of cell 0, outside the X mark
    assert pixel(board, 5, 5) != QColor("#ffffff")
