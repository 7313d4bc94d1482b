import logging

from PySide6.QtCore import QObject, Signal, Slot

from .game_logic import GameLogic, Outcome

log = logging.getLogger(__name__)


class GameController(QObject):
    """
    qt side of the game: owns the state and notifies views after each change
    """
    board_changed = Signal()
    status_changed = Signal(str)
    game_finished = Signal(object)    # GameResult

    def __init__(self, parent=None):
        super().__init__(parent)
        self.game_logic = GameLogic()

    @property
    def board(self):
        return self.game_logic.board

    @property
    def result(self):
        return self.game_logic.result

    @property
    def game_over(self):
        return self.game_logic.game_over

    def status_text(self):
        return self.game_logic.status_text()

    @Slot(int)
    def apply_move(self, index):
        # invalid moves are dropped without notification
        if not self.game_logic.apply_move(index):
            return False
        self._notify()
        result = self.game_logic.result
        if result.is_over:
            if result.outcome is Outcome.WIN:
                log.info("player %s wins on line %s", result.winner, result.line)
            else:
                log.info("game drawn after %d moves", self.game_logic.move_count)
            self.game_finished.emit(result)
        return True

    @Slot()
    def reset(self):
        self.game_logic.reset()
        log.info("new game, player X to move")
        self._notify()

    def _notify(self):
        # explicit re-render step
        self.board_changed.emit()
        self.status_changed.emit(self.game_logic.status_text())
