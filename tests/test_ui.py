"""
Tests for the Qt layer, run on the offscreen platform.
"""

import pytest

from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from tictactoe.game_logic import GameSession, Player, EMPTY, X, O
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow
from tictactoe.ui.name_dialog import NameDialog, NAMES_ERROR


@pytest.fixture
def window(qapp):
    w = TicTacToeWindow()
    yield w
    w.close()


def started(window, name_x="Alice", name_o="Bob"):
    assert window.session.start(name_x, name_o).ok
    window._on_game_started()
    return window


class TestBoardWidget:

    def test_cell_at_square(self, qapp):
        widget = BoardWidget(GameSession())
        widget.resize(300, 300)
        assert widget.cell_at(50, 50) == (0, 0)
        assert widget.cell_at(150, 150) == (1, 1)
        assert widget.cell_at(250, 150) == (1, 2)
        assert widget.cell_at(299, 299) == (2, 2)

    def test_cell_at_outside_board(self, qapp):
        widget = BoardWidget(GameSession())
        widget.resize(400, 300)
        # board is the centred 300x300 square
        assert widget.cell_at(10, 10) is None
        assert widget.cell_at(360, 10) is None
        assert widget.cell_at(60, 10) == (0, 0)
        assert widget.cell_at(340, 290) == (2, 2)

    def test_release_emits_cell(self, qapp):
        widget = BoardWidget(GameSession())
        widget.resize(300, 300)
        seen = []
        widget.cell_clicked.connect(lambda r, c: seen.append((r, c)))

        def release(x, y):
            pos = QPointF(x, y)
            widget.mouseReleaseEvent(QMouseEvent(
                QEvent.MouseButtonRelease, pos, pos,
                Qt.LeftButton, Qt.NoButton, Qt.NoModifier))

        release(250, 50)
        assert seen == [(0, 2)]
        # outside the board square
        widget.resize(400, 300)
        release(10, 10)
        assert seen == [(0, 2)]
        # input locked after a game ends
        widget.set_accept_clicks(False)
        release(200, 150)
        assert seen == [(0, 2)]


class TestNameDialog:

    def test_duplicate_names_rejected(self, qapp):
        session = GameSession()
        dialog = NameDialog(session)
        dialog.name_x_input.setText("Sam")
        dialog.name_o_input.setText("Sam")
        dialog.start_button.click()
        assert not session.is_running()
        assert not dialog.error_label.isHidden()
        assert dialog.error_label.text() == NAMES_ERROR
        assert not dialog.result()

    def test_blank_name_rejected(self, qapp):
        session = GameSession()
        dialog = NameDialog(session)
        dialog.name_x_input.setText("   ")
        dialog.name_o_input.setText("Bob")
        dialog.start_button.click()
        assert not session.is_running()
        assert not dialog.error_label.isHidden()

    def test_names_are_trimmed(self, qapp):
        session = GameSession()
        dialog = NameDialog(session)
        dialog.name_x_input.setText("  Alice ")
        dialog.name_o_input.setText("Bob")
        dialog.start_button.click()
        assert session.is_running()
        assert session.players() == (Player("Alice", X), Player("Bob", O))
        assert dialog.result()
        assert dialog.error_label.isHidden()

    def test_prefilled_from_last_game(self, qapp):
        session = GameSession()
        session.start("Alice", "Bob")
        dialog = NameDialog(session)
        assert dialog.name_x_input.text() == "Alice"
        assert dialog.name_o_input.text() == "Bob"


class TestMainWindow:

    def test_clicks_ignored_before_start(self, window):
        before = window.message_label.text()
        window._on_cell_clicked(0, 0)
        assert window.session.board_snapshot()[0][0] == EMPTY
        assert window.message_label.text() == before

    def test_restart_before_start_is_noop(self, window):
        window.restart_game()
        assert not window.session.is_running()
        assert window.restart_button.isHidden()

    def test_turn_messages(self, window):
        started(window)
        assert window.message_label.text() == "Alice's turn (X)"
        window._on_cell_clicked(1, 1)
        assert window.message_label.text() == "Bob's turn (O)"
        # occupied cell changes nothing
        window._on_cell_clicked(1, 1)
        assert window.message_label.text() == "Bob's turn (O)"

    def test_win_then_restart(self, window):
        started(window)
        for move in [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]:
            window._on_cell_clicked(*move)
        assert window.message_label.text() == "Alice (X) wins!"
        assert not window.restart_button.isHidden()
        assert not window.session.is_running()
        assert window.board_widget._highlight == ((0, 0), (0, 1), (0, 2))
        assert not window.board_widget._accept_clicks

        window.restart_game()
        assert window.session.is_running()
        assert window.session.board_snapshot() == [[EMPTY] * 3 for _ in range(3)]
        assert window.restart_button.isHidden()
        assert window.board_widget._highlight is None
        assert window.board_widget._accept_clicks
        assert window.message_label.text() == "Alice's turn (X)"

    def test_draw_message(self, window):
        started(window)
        moves = [
            (0, 0), (0, 1), (0, 2),
            (1, 1), (1, 0), (1, 2),
            (2, 1), (2, 0), (2, 2),
        ]
        for move in moves:
            window._on_cell_clicked(*move)
        assert window.message_label.text() == "It's a draw!"
        assert not window.restart_button.isHidden()
        assert window.board_widget._highlight is None
        assert not window.board_widget._accept_clicks
