from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import ACCENT_COLOR, PRIMARY_COLOR
from ..game_logic import BOARD_SIZE, CELL_COUNT, EMPTY, PLAYER_X, cell_index

# per theme: background, grid lines, finished-game veil
THEME_COLORS = {
    "light": ("#ffffff", "#90caf9", QColor(158, 158, 158, 110)),
    "dark": ("#333333", "#555555", QColor(0, 0, 0, 90)),
}
X_COLOR = PRIMARY_COLOR
O_COLOR = "#ef5350"

KEY_TO_CELL = {ord(str(n)): n - 1 for n in range(1, CELL_COUNT + 1)}  # Qt.Key_1..Key_9


class BoardWidget(QWidget):
    """
    draws the 3x3 board from the controller's state and reports clicks
    """
    cell_clicked = Signal(int)  # emits cell index 0-8

    def __init__(self, controller, theme="light", min_size=240, parent=None):
        super().__init__(parent)
        self.controller = controller  # reference to game state
        self.theme = theme if theme in THEME_COLORS else "light"
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(min_size, min_size))
        self.setFocusPolicy(Qt.StrongFocus)
        self.controller.board_changed.connect(self.refresh)
        self._update_accessibility()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # side of the square board and its top-left offset
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w - side) / 2, (h - side) / 2

    def cell_rect(self, index):
        side, ox, oy = self._geometry()
        cell = side / BOARD_SIZE
        row, col = divmod(index, BOARD_SIZE)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        side, ox, oy = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = min(int((x - ox) // cell), BOARD_SIZE - 1)
        row = min(int((y - oy) // cell), BOARD_SIZE - 1)
        return cell_index(row, col)

    def is_cell_enabled(self, index):
        # same rule as a disabled square: taken or game decided
        return not self.controller.game_over and self.controller.board[index] == EMPTY

    def refresh(self):
        self._update_accessibility()
        self.update()

    def _update_accessibility(self):
        labels = []
        for i, val in enumerate(self.controller.board):
            labels.append(f"Cell {i + 1}: {val}" if val else "Empty cell")
        self.setAccessibleName("Tic Tac Toe board")
        self.setAccessibleDescription("; ".join(labels))

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        background, grid, veil = THEME_COLORS[self.theme]
        board = self.controller.board
        result = self.controller.result
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, ox, oy = self._geometry()
            painter.fillRect(self.rect(), QColor(background))
            # winning cells first so marks sit on top
            if result.line:
                for i in result.line:
                    painter.fillRect(self.cell_rect(i), QColor(ACCENT_COLOR))
            cell_size = side / BOARD_SIZE
            painter.setPen(QPen(QColor(grid), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            for i, sym in enumerate(board):
                if not sym:
                    continue
                center = self.cell_rect(i).center()
                cx, cy = center.x(), center.y()
                rad = cell_size / 2 * 0.6
                if sym == PLAYER_X:
                    painter.setPen(QPen(QColor(X_COLOR), 6, Qt.SolidLine, Qt.RoundCap))
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 6))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # finished game: grey out everything except the winning line
            if result.is_over:
                for i in range(CELL_COUNT):
                    if not result.line or i not in result.line:
                        painter.fillRect(self.cell_rect(i), veil)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is not None and self.is_cell_enabled(index):
            self.cell_clicked.emit(index)  # notify controller

    def keyPressEvent(self, event):
        # number keys 1-9 pick cells in reading order
        index = KEY_TO_CELL.get(event.key())
        if index is None:
            super().keyPressEvent(event)
            return
        if self.is_cell_enabled(index):
            self.cell_clicked.emit(index)
