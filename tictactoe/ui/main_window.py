from ..config import ACCENT_COLOR, PRIMARY_COLOR, SECONDARY_COLOR, load_settings
from ..controller import GameController
from ..game_logic import Outcome
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont, QKeySequence
from PySide6.QtCore import Qt, Slot


STATUS_STYLES = {
    "turn": f"color: {PRIMARY_COLOR}; font-weight: bold;",
    "winner": f"color: #1b5e20; background-color: {ACCENT_COLOR}; "
              "border-radius: 6px; padding: 4px 10px; font-weight: bold;",
    "draw": f"color: {SECONDARY_COLOR}; font-style: italic; font-weight: bold;",
}


class TicTacToeWindow(QMainWindow):
    """
    main window: header, board, status panel and restart control
    """
    def __init__(self, settings=None):
        """
        init controller, ui widgets, signals
        """
        super().__init__()
        self.settings = settings or load_settings()
        self.controller = GameController(self)
        self.board_widget = BoardWidget(
            self.controller,
            theme=self.settings.theme,
            min_size=self.settings.min_board_size,
            parent=self,
        )
        self._setup_ui()
        self._update_status(self.controller.status_text())

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(self.settings.window_title)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()
        self.main_layout.addWidget(self.header_label)
        self.main_layout.addWidget(self.board_widget, 1)
        self._create_bottom_controls()     # status + restart
        self.main_layout.addWidget(self.controls_bottom_widget)
        self._create_footer()
        self.main_layout.addWidget(self.footer_label)

        # clicks go to the controller, the controller notifies back
        self.board_widget.cell_clicked.connect(self.controller.apply_move)
        self.controller.status_changed.connect(self._update_status)
        self.controller.game_finished.connect(self._on_game_finished)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.setShortcut(QKeySequence(QKeySequence.New))
        self.new_game_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence(QKeySequence.Quit))
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        self.header_label = QLabel("Tic Tac Toe")
        f = QFont(); f.setPointSize(20); f.setBold(True)
        self.header_label.setFont(f)
        self.header_label.setAlignment(Qt.AlignCenter)
        self.header_label.setStyleSheet(f"color: {PRIMARY_COLOR};")

    def _create_bottom_controls(self):
        # status label + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.status_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.restart_button = QPushButton("Restart")
        self.restart_button.setAccessibleName("Restart game")
        self.restart_button.setStyleSheet(
            f"QPushButton {{ background-color: {PRIMARY_COLOR}; color: white; "
            "border: none; border-radius: 6px; padding: 6px 16px; }"
            f"QPushButton:hover {{ background-color: {SECONDARY_COLOR}; }}"
        )
        self.restart_button.clicked.connect(self.reset_game)
        hl.addWidget(self.status_label)
        hl.addStretch(1)
        hl.addWidget(self.restart_button)

    def _create_footer(self):
        self.footer_label = QLabel("Modern Tic Tac Toe · PySide6")
        self.footer_label.setAlignment(Qt.AlignCenter)
        self.footer_label.setStyleSheet("color: #9e9e9e; font-size: 10px;")

    def status_kind(self):
        outcome = self.controller.result.outcome
        if outcome is Outcome.WIN:
            return "winner"
        if outcome is Outcome.DRAW:
            return "draw"
        return "turn"

    @Slot(str)
    def _update_status(self, text):
        # set status text + style for current result
        self.status_label.setStyleSheet(STATUS_STYLES[self.status_kind()])
        self.status_label.setText(text)
        self.status_label.setAccessibleName(text)

    @Slot(object)
    def _on_game_finished(self, result):
        # move focus to restart so Enter starts the next game
        self.restart_button.setFocus()

    @Slot()
    def reset_game(self):
        self.controller.reset()
        self.board_widget.setFocus()
