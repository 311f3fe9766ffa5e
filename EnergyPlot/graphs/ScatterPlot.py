# graphs/ScatterPlot.py

import html
import logging
import math
from typing import Any, List, Optional, Sequence, Tuple

import pyqtgraph as pg
from PyQt5 import QtWidgets

from EnergyPlot.BasePlot import GraphBase
from EnergyPlot.CountryRecord import CountryRecord
from EnergyPlot.Layout import PlotLayout
from EnergyPlot.Scales import OrdinalColors, compute_scales, point_size

logger = logging.getLogger(__name__)

X_LABEL = "GDP (in Trillion US Dollars) in 2010"
Y_LABEL = "Energy Consumption per Capita (in Million BTUs per person)"
LEGEND_TITLE = "Total Energy Consumption"

# (radius, circle offset above the plot bottom, caption offset, caption)
LEGEND_ENTRIES = [
    (5, 175, 172, " 1 Trillion BTUs"),
    (15.8, 150, 147, " 10 Trillion BTUs"),
    (50, 80, 77, " 100 Trillion BTUs"),
]

Z_DATA = 10
Z_LABELS = 15
Z_LEGEND = 20
Z_TOOLTIP = 30


def format_number(value: float) -> str:
    """Shortest round-trip text for a float, without a trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def tooltip_lines(record: CountryRecord) -> List[str]:
    return [
        record.name,
        f"Population: {format_number(record.population)} million",
        f"GDP: ${format_number(record.gdp)} trillion",
        f"EPC: {format_number(record.epc)} million BTU",
        f"Total: {format_number(record.total)} trillion BTU",
    ]


class ScatterPlot(GraphBase):
    """
    GDP vs. energy-per-capita scatterplot drawn onto a pyqtgraph PlotItem.

    The surface works in plot-area pixels with y growing downward, so the
    outputs of the two scales are used directly as item coordinates and
    pan/zoom is left entirely to the surface's view transform.
    """

    def __init__(
        self,
        records: Sequence[CountryRecord],
        surface: Any,
        *,
        layout: Optional[PlotLayout] = None,
        show_labels: bool = False,
    ) -> None:
        super().__init__(surface)
        self.records: Tuple[CountryRecord, ...] = tuple(records)
        self.layout = layout if layout is not None else PlotLayout()
        self.show_labels = show_labels

        self.width = self.layout.width
        self.height = self.layout.height

        # Raises EmptyDatasetError before anything touches the surface.
        self.x_scale, self.y_scale = compute_scales(self.records, self.width, self.height)
        self.colors = OrdinalColors()

        self._scatter: Optional[pg.ScatterPlotItem] = None
        self._label_items: List[Any] = []
        self.tooltip: Optional[pg.TextItem] = None
        self._tooltip_index: Optional[int] = None

    def draw(self) -> None:
        self.draw_data()
        if self.show_labels:
            self.draw_labels()
        self.draw_x_axis()
        self.draw_y_axis()
        self.draw_legend()
        logger.info("[ScatterPlot] Drew %d of %d record(s)", self._drawn_count(), len(self.records))

    def point_size(self, record: CountryRecord) -> float:
        return point_size(record)

    def point_position(self, record: CountryRecord) -> Tuple[float, float]:
        return self.x_scale(record.gdp), self.y_scale(record.epc)

    def draw_data(self) -> None:
        spots = []
        for idx, rec in enumerate(self.records):
            x, y = self.point_position(rec)
            radius = self.point_size(rec)
            if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(radius)):
                logger.warning("[ScatterPlot] Skipping %r: non-numeric values", rec.name)
                continue
            spots.append({
                "pos": (x, y),
                # pyqtgraph sizes are diameters
                "size": 2 * radius,
                "brush": pg.mkBrush(self.colors(rec.country)),
                "data": idx,
            })

        self._scatter = pg.ScatterPlotItem(pen=None, pxMode=False, hoverable=True, tip=None)
        self._scatter.setData(spots=spots)
        self._scatter.setZValue(Z_DATA)
        self._scatter.sigHovered.connect(self._on_hovered)
        self._add(self._scatter)

    def draw_labels(self) -> None:
        for rec in self.records:
            x, y = self.point_position(rec)
            if not (math.isfinite(x) and math.isfinite(y)):
                continue
            label = pg.TextItem(text=rec.name, color="k", anchor=(0, 1))
            label.setPos(x, y)
            label.setZValue(Z_LABELS)
            self._add(label)
            self._label_items.append(label)

    def remove_labels(self) -> None:
        for label in self._label_items:
            self._remove(label)
        self._label_items = []

    def set_show_labels(self, visible: bool) -> None:
        self.show_labels = bool(visible)
        if self._scatter is None:
            return
        self.remove_labels()
        if self.show_labels:
            self.draw_labels()

    def draw_x_axis(self) -> None:
        axis = self.surface.getAxis("bottom")
        self._configure_axis(axis, self.x_scale)
        axis.setLabel(X_LABEL, **{"font-size": "12px"})
        self.surface.showAxis("bottom")

    def draw_y_axis(self) -> None:
        axis = self.surface.getAxis("left")
        self._configure_axis(axis, self.y_scale)
        axis.setLabel(Y_LABEL, **{"font-size": "12px"})
        self.surface.showAxis("left")

    def _configure_axis(self, axis: Any, scale: Any) -> None:
        ticks = [(scale(t), format_number(t)) for t in scale.ticks()]
        axis.setTicks([ticks])
        axis.setStyle(tickTextOffset=self.layout.tick_padding)

    def draw_legend(self) -> None:
        w, h = self.width, self.height

        box = QtWidgets.QGraphicsRectItem(w - 250, h - 190, 220, 180)
        box.setBrush(pg.mkBrush("lightgrey"))
        box.setPen(pg.mkPen(None))
        box.setZValue(Z_LEGEND)
        self._add(box)

        for radius, circle_offset, caption_offset, caption in LEGEND_ENTRIES:
            cx, cy = w - 100, h - circle_offset
            circle = QtWidgets.QGraphicsEllipseItem(cx - radius, cy - radius, 2 * radius, 2 * radius)
            circle.setBrush(pg.mkBrush("w"))
            circle.setPen(pg.mkPen(None))
            circle.setZValue(Z_LEGEND + 1)
            self._add(circle)

            text = pg.TextItem(text=caption, color="k", anchor=(1, 1))
            text.setPos(w - 150, h - caption_offset)
            text.setZValue(Z_LEGEND + 1)
            self._add(text)

        title = pg.TextItem(
            html=f'<span style="color: green; font-size: 16px;">{LEGEND_TITLE}</span>',
            anchor=(0.5, 1),
        )
        title.setPos(w - 150, h - 15)
        title.setZValue(Z_LEGEND + 1)
        self._add(title)

    def tooltip_position(self, record: CountryRecord) -> Tuple[float, float]:
        """Top-left corner of the tooltip box: centred above the point."""
        x, y = self.point_position(record)
        return (
            x - self.layout.tooltip_width / 2,
            y - self.layout.tooltip_height - self.point_size(record),
        )

    def show_tooltip(self, record: CountryRecord) -> pg.TextItem:
        """
        Display the tooltip for `record`.
        Any tooltip already on screen is removed first, so at most one
        exists at a time.
        """
        self.hide_tooltip()

        lay = self.layout
        body = "<br>".join(html.escape(line) for line in tooltip_lines(record))
        markup = (
            f'<div style="color: black; line-height: {lay.tooltip_spacing}px;">{body}</div>'
        )
        tip = pg.TextItem(
            html=markup,
            anchor=(0, 0),
            border=pg.mkPen("k"),
            fill=pg.mkBrush(255, 255, 255, 230),
        )
        tip.setTextWidth(lay.tooltip_width - 2 * lay.tooltip_margin)
        tip.setPos(*self.tooltip_position(record))
        tip.setZValue(Z_TOOLTIP)
        self._add(tip)

        self.tooltip = tip
        try:
            self._tooltip_index = self.records.index(record)
        except ValueError:
            self._tooltip_index = None
        logger.debug("[ScatterPlot] Tooltip shown for %r", record.name)
        return tip

    def hide_tooltip(self) -> None:
        if self.tooltip is None:
            return
        self._remove(self.tooltip)
        logger.debug("[ScatterPlot] Tooltip hidden")
        self.tooltip = None
        self._tooltip_index = None

    def _on_hovered(self, item: Any, points: Any, ev: Any) -> None:
        if points is None or len(points) == 0:
            self.hide_tooltip()
            return
        idx = points[0].data()
        if idx == self._tooltip_index and self.tooltip is not None:
            return
        self.show_tooltip(self.records[int(idx)])

    def _drawn_count(self) -> int:
        if self._scatter is None:
            return 0
        return len(self._scatter.points())

    def clear(self) -> None:
        self.hide_tooltip()
        super().clear()
        self._scatter = None
        self._label_items = []
        for name in ("bottom", "left"):
            axis = self.surface.getAxis(name)
            axis.setTicks(None)
            axis.setLabel("")

    def bounds(self) -> Tuple[float, float, float, float]:
        return (0.0, float(self.width), 0.0, float(self.height))
