# Layout.py

from typing import Any


class PlotLayout:
    """
    Fixed pixel geometry of the chart.
    The plot area is the outer size minus the margins; every drawing
    routine positions itself relative to that area.
    """

    _DEFAULTS = {
        "outer_width": 960,
        "outer_height": 500,
        "margin_left": 80,
        "margin_right": 80,
        "margin_top": 50,
        "margin_bottom": 50,
        "tick_padding": 2,
        "tooltip_width": 175,
        "tooltip_height": 75,
        "tooltip_margin": 5,
        "tooltip_spacing": 12,
    }

    def __init__(self, **overrides: Any) -> None:
        unknown = set(overrides) - set(self._DEFAULTS)
        if unknown:
            raise TypeError(f"PlotLayout() got unexpected option(s): {', '.join(sorted(unknown))}")
        for key, default in self._DEFAULTS.items():
            setattr(self, key, overrides.get(key, default))

    @property
    def width(self) -> int:
        return self.outer_width - self.margin_left - self.margin_right

    @property
    def height(self) -> int:
        return self.outer_height - self.margin_top - self.margin_bottom

    def __repr__(self) -> str:
        return f"PlotLayout(width={self.width}, height={self.height})"
