from dataclasses import dataclass
from typing import List, Optional, Tuple

BOARD_SIZE = 3                        # fixed 3x3 grid
EMPTY = ''
X = 'X'
O = 'O'

# failure reasons
INVALID_NAMES = "invalid-names"
NO_PLAYERS = "no-players"
NOT_RUNNING = "not-running"
OCCUPIED_OR_INVALID = "occupied-or-invalid"

# move outcomes
WIN = "win"
DRAW = "draw"
CONTINUE = "continue"

# every way to get three in a row, as (row, col) triples
WINNING_LINES = (
    # rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # cols
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # diags
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)

Grid = List[List[str]]
Line = Tuple[Tuple[int, int], ...]


def _in_range(index):
    # bool is an int subclass but never a coordinate
    return isinstance(index, int) and not isinstance(index, bool) \
        and 0 <= index < BOARD_SIZE


class Board:
    """
    3x3 grid of cells, filled once per game
    """
    def __init__(self):
        self._cells = self._empty_grid()

    @staticmethod
    def _empty_grid():
        return [[EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]

    def place(self, symbol, row, col):
        """
        put symbol on an empty cell
        returns: False (nothing changed) if off the board or taken
        """
        if not (_in_range(row) and _in_range(col)):
            return False
        if self._cells[row][col] != EMPTY:
            return False
        self._cells[row][col] = symbol
        return True

    def snapshot(self) -> Grid:
        """copy of the cells, safe to mutate"""
        return [list(row) for row in self._cells]

    def reset(self):
        self._cells = self._empty_grid()

    def is_full(self):
        return all(cell != EMPTY for row in self._cells for cell in row)

    def winning_line(self, symbol) -> Optional[Line]:
        """
        first triple held entirely by symbol, or None
        """
        for line in WINNING_LINES:
            if all(self._cells[r][c] == symbol for r, c in line):
                return line
        return None


@dataclass(frozen=True)
class Player:
    name: str
    symbol: str


@dataclass
class StartResult:
    """outcome of start/restart"""
    ok: bool
    reason: Optional[str] = None


@dataclass
class MoveResult:
    """
    outcome of one play_round call

    failed moves carry only reason; successful ones carry status plus
    winner/line (win) or next (continue)
    """
    ok: bool
    reason: Optional[str] = None
    status: Optional[str] = None
    winner: Optional[Player] = None
    next: Optional[Player] = None
    line: Optional[Line] = None


def _is_blank(name):
    return not isinstance(name, str) or not name.strip()


class GameSession:
    """
    two named players taking turns on one board

    all failures come back as results with a reason code, nothing raises
    """
    def __init__(self):
        self._board = Board()
        self._player_x = Player(EMPTY, X)  # names set by start()
        self._player_o = Player(EMPTY, O)
        self._active = self._player_x      # X always starts
        self._running = False

    def start(self, name_x, name_o) -> StartResult:
        """
        new game with fresh names
        names must be non-blank and differ (exact comparison)
        """
        if _is_blank(name_x) or _is_blank(name_o) or name_x == name_o:
            return StartResult(False, INVALID_NAMES)
        self._player_x = Player(name_x, X)
        self._player_o = Player(name_o, O)
        self._begin()
        return StartResult(True)

    def restart(self) -> StartResult:
        """
        new game with the names from the last start
        """
        if not self._player_x.name or not self._player_o.name:
            return StartResult(False, NO_PLAYERS)
        self._begin()
        return StartResult(True)

    def _begin(self):
        self._board.reset()
        self._active = self._player_x
        self._running = True

    def play_round(self, row, col) -> MoveResult:
        """
        place the active player's symbol, then check win before draw
        """
        if not self._running:
            return MoveResult(False, reason=NOT_RUNNING)
        player = self._active
        if not self._board.place(player.symbol, row, col):
            return MoveResult(False, reason=OCCUPIED_OR_INVALID)

        line = self._board.winning_line(player.symbol)
        if line is not None:
            self._running = False          # active stays on the winner
            return MoveResult(True, status=WIN, winner=player, line=line)

        if self._board.is_full():
            self._running = False
            return MoveResult(True, status=DRAW)

        self._active = self._other(player)
        return MoveResult(True, status=CONTINUE, next=self._active)

    def _other(self, player):
        return self._player_o if player is self._player_x else self._player_x

    def active_player(self) -> Player:
        return self._active

    def players(self) -> Tuple[Player, Player]:
        return self._player_x, self._player_o

    def board_snapshot(self) -> Grid:
        return self._board.snapshot()

    def is_running(self):
        return self._running
