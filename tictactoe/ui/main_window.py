import logging

from ..game_logic import GameSession, WIN, DRAW
from ..ui.board_widget import BoardWidget
from ..ui.name_dialog import NameDialog

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tic-Tac-Toe"


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.session = GameSession()    # one session, reused every game
        self.board_widget = BoardWidget(self.session, parent=self)
        self._setup_ui()
        self._update_message("Start a new game from the Game menu.")

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + restart
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.set_accept_clicks(False)
        self.restart_button.setVisible(False)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.prompt_for_names)
        restart_action = QAction("Restart", self)
        restart_action.triggered.connect(self.restart_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, restart_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + restart button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.restart_button = QPushButton("Restart")
        self.restart_button.clicked.connect(self.restart_game)
        hl.addWidget(self.message_label); hl.addStretch(1)
        hl.addWidget(self.restart_button)

    @Slot(str)
    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _show_turn(self, player):
        self._update_message(f"{player.name}'s turn ({player.symbol})", is_turn=True)

    def _on_game_started(self):
        # fresh board after start/restart
        self.board_widget.set_highlight(None)
        self.board_widget.set_accept_clicks(True)
        self.restart_button.setVisible(False)
        self._show_turn(self.session.active_player())

    @Slot()
    def prompt_for_names(self):
        """
        ask for names; a rejected dialog leaves the current game alone
        """
        dialog = NameDialog(self.session, self)
        if dialog.exec():                  # accepted
            self._on_game_started()

    @Slot()
    def restart_game(self):
        res = self.session.restart()
        if not res.ok:
            logger.debug("restart ignored: %s", res.reason)
            return
        logger.info("game restarted")
        self._on_game_started()

    def _handle_game_over(self, msg):
        # end game UI updates
        self._update_message(msg, is_success=True)
        self.board_widget.set_accept_clicks(False)
        self.restart_button.setVisible(True)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        res = self.session.play_round(r, c)
        if not res.ok:
            logger.debug("move (%d, %d) ignored: %s", r, c, res.reason)
            return
        self.board_widget.update()
        if res.status == WIN:
            self.board_widget.set_highlight(res.line)
            logger.info("%s (%s) wins", res.winner.name, res.winner.symbol)
            self._handle_game_over(f"{res.winner.name} ({res.winner.symbol}) wins!")
        elif res.status == DRAW:
            logger.info("game drawn")
            self._handle_game_over("It's a draw!")
        else:
            self._show_turn(res.next)
