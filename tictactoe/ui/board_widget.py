from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    X_COLOR, O_COLOR, GRID_COLOR, BOARD_BG_COLOR, DISABLED_CELL_COLOR, WIN_LINE_COLOR,
)
from ..game_logic import BOARD_SIZE, Mark, index_to_row_col, row_col_to_index

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index on click

    def __init__(self, coordinator, parent=None):
        super().__init__(parent)
        self.coordinator = coordinator  # source of board snapshots
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centered in widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def _cell_center(self, index, ox, oy, cell_size):
        r, c = index_to_row_col(index)
        return QPointF(ox + c*cell_size + cell_size/2, oy + r*cell_size + cell_size/2)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, disabled cells and winning line
        """
        snap = self.coordinator.snapshot()
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), QColor(BOARD_BG_COLOR))
            cell_size = side / BOARD_SIZE
            # dim cells that can't be clicked right now
            for i, sym in enumerate(snap.cells):
                if sym is Mark.EMPTY and not snap.clickable[i]:
                    r, c = index_to_row_col(i)
                    painter.fillRect(QRectF(ox + c*cell_size, oy + r*cell_size,
                                            cell_size, cell_size),
                                     QColor(DISABLED_CELL_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # draw marks
            rad = cell_size/2 * 0.7
            for i, sym in enumerate(snap.cells):
                if sym is Mark.EMPTY: continue
                center = self._cell_center(i, ox, oy, cell_size)
                cx, cy = center.x(), center.y()
                if sym is Mark.X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(center, rad, rad)
            # strike through the completed line
            if snap.winning_line:
                first, last = snap.winning_line[0], snap.winning_line[-1]
                painter.setPen(QPen(QColor(WIN_LINE_COLOR), 6, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(self._cell_center(first, ox, oy, cell_size),
                                 self._cell_center(last, ox, oy, cell_size))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        ox, oy, side = self._geometry()
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return
        cell = side / BOARD_SIZE
        if cell <= 0: return
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        index = row_col_to_index(row, col)
        if not self.coordinator.snapshot().clickable[index]:
            return
        self.cell_clicked.emit(index)  # notify main window
