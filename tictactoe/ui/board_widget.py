from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, X

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
HIGHLIGHT_COLOR = QColor(255, 255, 255, 40)
GRID_WIDTH = 2
MARK_WIDTH = 4
MARK_SCALE = 0.7                 # mark radius as a share of half a cell


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session          # only read through snapshots
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling
        self._highlight = None          # winning triple to shade

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def set_highlight(self, line):
        self._highlight = line
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centred in the widget: (x offset, y offset, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None outside the board
        """
        ox, oy, side = self._geometry()
        if side <= 0:
            return None
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        row = int((y - oy) // cell); col = int((x - ox) // cell)
        # clamp float edge cases
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row, col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and shade the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / BOARD_SIZE
            if self._highlight:
                for r, c in self._highlight:
                    painter.fillRect(QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                                            cell_size, cell_size), HIGHLIGHT_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, GRID_WIDTH))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            grid = self.session.board_snapshot()
            for r, row in enumerate(grid):
                for c, sym in enumerate(row):
                    if not sym: continue
                    cx = offset_x + c*cell_size + cell_size/2
                    cy = offset_y + r*cell_size + cell_size/2
                    rad = cell_size/2 * MARK_SCALE
                    if sym == X:
                        painter.setPen(QPen(X_COLOR, MARK_WIDTH))
                        # two crossing lines
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    else:
                        painter.setPen(QPen(O_COLOR, MARK_WIDTH))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is not None:
            self.cell_clicked.emit(*cell)  # notify main window
