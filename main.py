import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QPalette, QColor
from tictactoe.ui.main_window import TicTacToeWindow

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
WINDOW_SIZE = (420, 480)

DARK = QColor(35, 35, 35)
MID = QColor(53, 53, 53)
LIGHT = QColor(66, 66, 66)
MUTED = QColor(127, 127, 127)
ACCENT = QColor(42, 130, 218)

# role -> color for the dark Fusion theme
DARK_THEME = {
    QPalette.Window: MID,
    QPalette.WindowText: Qt.white,
    QPalette.Base: DARK,
    QPalette.AlternateBase: MID,
    QPalette.Text: Qt.white,
    QPalette.Button: LIGHT,
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: ACCENT,
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(160, 160, 160),
}
# greyed out when disabled
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def dark_palette():
    palette = QPalette()
    for role, color in DARK_THEME.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, MUTED)
    return palette


def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    app = QApplication(sys.argv)
    app.setStyle('Fusion')
    app.setPalette(dark_palette())

    window = TicTacToeWindow()
    window.resize(*WINDOW_SIZE)
    window.show()
    # name prompt needs a running event loop
    QTimer.singleShot(0, window.prompt_for_names)
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
