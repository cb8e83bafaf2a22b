import logging

from PySide6.QtWidgets import (
    QDialog, QFormLayout, QLineEdit, QLabel, QPushButton, QVBoxLayout
)
from PySide6.QtCore import Slot

logger = logging.getLogger(__name__)

NAMES_ERROR = "Enter two different names."


class NameDialog(QDialog):
    """
    modal form asking for both player names before a game
    """
    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session
        self.setWindowTitle("New Game")
        self.setModal(True)

        layout = QVBoxLayout(self)
        form = QFormLayout()
        self.name_x_input = QLineEdit()
        self.name_x_input.setPlaceholderText("Player X")
        self.name_o_input = QLineEdit()
        self.name_o_input.setPlaceholderText("Player O")
        form.addRow("Player X:", self.name_x_input)
        form.addRow("Player O:", self.name_o_input)
        layout.addLayout(form)

        self.error_label = QLabel(NAMES_ERROR)
        self.error_label.setStyleSheet("color: #ff8a8a; font-weight: bold;")
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        self.start_button = QPushButton("Start")
        self.start_button.setDefault(True)
        self.start_button.clicked.connect(self._on_submit)
        layout.addWidget(self.start_button)

        # prefill from the previous game, if any
        player_x, player_o = session.players()
        self.name_x_input.setText(player_x.name)
        self.name_o_input.setText(player_o.name)

    @Slot()
    def _on_submit(self):
        # whitespace is the dialog's problem, not the session's
        name_x = self.name_x_input.text().strip()
        name_o = self.name_o_input.text().strip()
        res = self.session.start(name_x, name_o)
        if not res.ok:
            logger.debug("start rejected: %s", res.reason)
            self.error_label.setVisible(True)
            return
        self.error_label.setVisible(False)
        logger.info("new game: %s (X) vs %s (O)", name_x, name_o)
        self.accept()
