import os

# must be set before pytest-qt creates the QApplication
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tictactoe.controller import GameController


@pytest.fixture
def controller(qtbot):
    return GameController()


@pytest.fixture
def play():
    # target is a GameLogic or GameController
    def _play(target, moves):
        for index in moves:
            target.apply_move(index)
    return _play
