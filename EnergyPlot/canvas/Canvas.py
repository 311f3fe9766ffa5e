# canvas/Canvas.py

import logging
from typing import Any, Optional, Sequence

import pyqtgraph as pg
from PyQt5 import QtCore, QtWidgets
from PyQt5.QtCore import QRect
from PyQt5.QtWidgets import QAction, QMenu, QToolBar, QToolButton

from EnergyPlot.CountryRecord import CountryRecord
from EnergyPlot.Errors import EmptyDatasetError
from EnergyPlot.Layout import PlotLayout
from EnergyPlot.graphs.ScatterPlot import ScatterPlot
from EnergyPlot.widgets.ViewBox import ViewBox

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data to display."


class Canvas(QtWidgets.QWidget):
    """
    Host window for the scatterplot.
    Owns the one drawing surface (a pyqtgraph PlotItem) and swaps it for
    a message page when loading fails or the dataset is empty.
    """

    def __init__(self, name: str = "Energy Scatterplot", *, layout: Optional[PlotLayout] = None,
                 show_labels: bool = False, parent: Optional[Any] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(name)
        self.layout_config: PlotLayout = layout if layout is not None else PlotLayout()
        self._show_labels: bool = show_labels
        self._graph: Optional[ScatterPlot] = None

        self.toolbar = QToolBar("Graph Toolbar", self)
        self.toolbar.setMovable(False)
        self.toolbar.setFloatable(False)
        self.toolbar.setFixedHeight(24)
        self._create_actions()

        self.plot_widget: pg.PlotWidget = pg.PlotWidget(viewBox=ViewBox(), background="w")
        self.plot_item: Any = self.plot_widget.getPlotItem()
        self.view_box: ViewBox = self.plot_widget.getViewBox()
        self.plot_item.hideButtons()
        self.plot_item.setContentsMargins(0, 0, 0, 0)
        for name in ("bottom", "left"):
            axis = self.plot_item.getAxis(name)
            axis.setPen("k")
            axis.setTextPen("k")

        self.message_label = QtWidgets.QLabel(self)
        self.message_label.setAlignment(QtCore.Qt.AlignCenter)
        self.message_label.setWordWrap(True)

        self.stack = QtWidgets.QStackedWidget(self)
        self.stack.addWidget(self.plot_widget)
        self.stack.addWidget(self.message_label)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.toolbar)
        layout.addWidget(self.stack)
        self.setLayout(layout)

        lay = self.layout_config
        self.view_box.set_home(0, 0, lay.width, lay.height)
        self.resize(lay.outer_width, lay.outer_height + self.toolbar.height())

    def _create_actions(self) -> None:
        window_menu = QMenu("Window", self)
        window_menu.addAction("Reset View", self.reset_view)
        window_menu.addAction("Screenshot", self.take_screenshot)
        window_menu.addAction("Close", self.close)

        window_button = QToolButton(self)
        window_button.setText("Window")
        window_button.setMenu(window_menu)
        window_button.setPopupMode(QToolButton.InstantPopup)
        self.toolbar.addWidget(window_button)

        view_menu = QMenu("View", self)
        self.labels_action = QAction("Show Country Labels", self, checkable=True)
        self.labels_action.setChecked(self._show_labels)
        self.labels_action.toggled.connect(self.set_show_labels)
        view_menu.addAction(self.labels_action)

        view_button = QToolButton(self)
        view_button.setText("View")
        view_button.setMenu(view_menu)
        view_button.setPopupMode(QToolButton.InstantPopup)
        self.toolbar.addWidget(view_button)

    @property
    def graph(self) -> Optional[ScatterPlot]:
        return self._graph

    def plot(self, records: Sequence[CountryRecord], **kwargs: Any) -> Optional[ScatterPlot]:
        """
        Build the scatterplot for `records` on this canvas's surface and
        draw it, replacing any previous plot.
        Keyword arguments (`layout`, `show_labels`) override the canvas
        defaults for this plot only.
        An empty dataset switches to the "no data" page and returns None.
        """
        self.unplot()
        try:
            options = {"layout": self.layout_config, "show_labels": self._show_labels}
            options.update(kwargs)
            graph = ScatterPlot(records, self.plot_item, **options)
        except EmptyDatasetError as e:
            logger.warning("[Canvas] Nothing to plot: %s", e)
            self.show_no_data()
            return None

        graph.draw()
        self._graph = graph
        self.stack.setCurrentWidget(self.plot_widget)
        x0, x1, y0, y1 = graph.bounds()
        self.view_box.set_home(x0, y0, x1, y1)
        return graph

    def unplot(self) -> None:
        if self._graph is None:
            return
        self._graph.clear()
        self._graph = None

    def show_error(self, message: str) -> None:
        logger.error("[Canvas] %s", message)
        self.unplot()
        self.message_label.setText(f"Could not load data:\n{message}")
        self.message_label.setStyleSheet("color: darkred;")
        self.stack.setCurrentWidget(self.message_label)

    def show_no_data(self) -> None:
        self.unplot()
        self.message_label.setText(NO_DATA_MESSAGE)
        self.message_label.setStyleSheet("color: gray;")
        self.stack.setCurrentWidget(self.message_label)

    def is_showing_message(self) -> bool:
        return self.stack.currentWidget() is self.message_label

    def set_show_labels(self, visible: bool) -> None:
        self._show_labels = bool(visible)
        if self.labels_action.isChecked() != self._show_labels:
            self.labels_action.setChecked(self._show_labels)
        if self._graph is not None:
            self._graph.set_show_labels(self._show_labels)

    def reset_view(self) -> None:
        self.view_box.reset_view()

    def take_screenshot(self, filename: Optional[str] = None) -> str:
        pixmap = self.grab(QRect(0, 0, self.width(), self.height()))
        filename = filename or f"screenshot_{id(self)}.png"
        pixmap.save(filename)
        logger.info("[Canvas] Screenshot saved to %s", filename)
        return filename
