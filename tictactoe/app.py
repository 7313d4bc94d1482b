import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from .config import PRIMARY_COLOR, load_settings
from .ui.main_window import TicTacToeWindow

log = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

LIGHT_PALETTE = {
    QPalette.Window: QColor("#f5f7fa"),
    QPalette.WindowText: QColor("#212121"),
    QPalette.Base: QColor("#ffffff"),
    QPalette.AlternateBase: QColor("#e3f2fd"),
    QPalette.ToolTipBase: QColor("#ffffff"),
    QPalette.ToolTipText: QColor("#212121"),
    QPalette.Text: QColor("#212121"),
    QPalette.Button: QColor("#ffffff"),
    QPalette.ButtonText: QColor("#212121"),
    QPalette.BrightText: QColor(Qt.red),
    QPalette.Link: QColor(PRIMARY_COLOR),
    QPalette.Highlight: QColor(PRIMARY_COLOR),
    QPalette.HighlightedText: QColor(Qt.white),
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

DARK_PALETTE = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: QColor(Qt.white),
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.ToolTipBase: QColor(Qt.white),
    QPalette.ToolTipText: QColor(Qt.black),
    QPalette.Text: QColor(Qt.white),
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: QColor(Qt.white),
    QPalette.BrightText: QColor(Qt.red),
    QPalette.Link: QColor(42, 130, 218),
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: QColor(Qt.white),
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

DISABLED_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def build_palette(theme: str) -> QPalette:
    """
    Build the light or dark palette; unknown themes get the light one.
    """
    roles = DARK_PALETTE if theme == "dark" else LIGHT_PALETTE
    palette = QPalette()
    for role, color in roles.items():
        palette.setColor(role, color)
    # Disabled roles
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_COLOR)
    return palette


def configure_logging(level_name: str = "INFO"):
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    # handlers first so warnings about bad settings use the format
    configure_logging()
    settings = load_settings()
    configure_logging(settings.log_level)
    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)
    app.setStyle('Fusion')
    app.setPalette(build_palette(settings.theme))

    window = TicTacToeWindow(settings)
    window.show()
    log.info("window shown (theme=%s)", settings.theme)
    return app.exec()
