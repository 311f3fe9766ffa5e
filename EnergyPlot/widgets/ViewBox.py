# widgets/ViewBox.py

import pyqtgraph as pg
from PyQt5 import QtCore


class ViewBox(pg.ViewBox):
    """
    Pan/zoom view over the plot area, in pixels with y growing downward.
    Drag pans, wheel zooms; the view is never clamped. A double click
    returns to the home rectangle.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, enableMouse=True, invertY=True, lockAspect=True, enableMenu=False, **kwargs)
        self.setMouseMode(pg.ViewBox.PanMode)
        self._home = None

    def set_home(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self._home = QtCore.QRectF(x0, y0, x1 - x0, y1 - y0)
        self.reset_view()

    def home(self):
        if self._home is None:
            return None
        return (self._home.left(), self._home.top(), self._home.right(), self._home.bottom())

    def reset_view(self) -> None:
        if self._home is None:
            return
        self.setRange(rect=self._home, padding=0)

    def mouseClickEvent(self, ev):
        if ev.double() and ev.button() == QtCore.Qt.LeftButton:
            ev.accept()
            self.reset_view()
            return
        super().mouseClickEvent(ev)
