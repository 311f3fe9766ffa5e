# Scales.py

import math
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from EnergyPlot.CountryRecord import CountryRecord
from EnergyPlot.Errors import EmptyDatasetError

# Head-room above the largest observed value on each axis.
X_PADDING = 1.05
Y_PADDING = 1.25

# Radius of a point is sqrt(total) / SIZE_DIVISOR pixels.
SIZE_DIVISOR = 0.2

CATEGORY10 = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
]


class LinearScale:
    """
    Affine map from a data domain onto a pixel range.
    Values outside the domain are extrapolated, never clamped.
    """

    def __init__(self, domain: Tuple[float, float], range: Tuple[float, float]) -> None:
        d0, d1 = float(domain[0]), float(domain[1])
        if d0 == d1:
            raise ValueError(f"degenerate scale domain: {domain}")
        self.domain: Tuple[float, float] = (d0, d1)
        self.range: Tuple[float, float] = (float(range[0]), float(range[1]))

    def __call__(self, value: Any) -> Any:
        d0, d1 = self.domain
        r0, r1 = self.range
        if np.isscalar(value):
            return r0 + (float(value) - d0) / (d1 - d0) * (r1 - r0)
        arr = np.asarray(value, dtype=float)
        return r0 + (arr - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: Any) -> Any:
        d0, d1 = self.domain
        r0, r1 = self.range
        if np.isscalar(pixel):
            return d0 + (float(pixel) - r0) / (r1 - r0) * (d1 - d0)
        arr = np.asarray(pixel, dtype=float)
        return d0 + (arr - r0) / (r1 - r0) * (d1 - d0)

    def ticks(self, count: int = 10) -> List[float]:
        """
        Round tick values inside the domain, roughly `count` of them,
        spaced 1, 2 or 5 times a power of ten.
        """
        lo, hi = sorted(self.domain)
        if count <= 0:
            return []
        step = _tick_step(lo, hi, count)
        first = math.ceil(lo / step)
        last = math.floor(hi / step)
        return [float(np.round(k * step, 12)) for k in range(first, last + 1)]

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"


def _tick_step(lo: float, hi: float, count: int) -> float:
    raw = (hi - lo) / count
    power = math.floor(math.log10(raw))
    error = raw / 10 ** power
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    return factor * 10.0 ** power


def _padded_max(values: Sequence[float], padding: float, label: str) -> float:
    arr = np.asarray(values, dtype=float)
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        raise EmptyDatasetError(f"no finite {label} values to scale")
    top = math.ceil(float(np.max(finite)) * padding)
    # An all-zero column would collapse the domain to a point.
    return float(top) if top > 0 else 1.0


def compute_scales(records: Sequence[CountryRecord], width: float, height: float) -> Tuple[LinearScale, LinearScale]:
    """
    Build the x (GDP) and y (energy per capita) scales for a plot area
    of `width` x `height` pixels. The y range is inverted because pixel
    rows grow downward.
    """
    if len(records) == 0:
        raise EmptyDatasetError("cannot compute scales for an empty dataset")

    x_max = _padded_max([r.gdp for r in records], X_PADDING, "gdp")
    y_max = _padded_max([r.epc for r in records], Y_PADDING, "epc")

    x_scale = LinearScale((0, x_max), (0, width))
    y_scale = LinearScale((0, y_max), (height, 0))
    return x_scale, y_scale


def point_size(record: CountryRecord) -> float:
    total = record.total
    if not total >= 0:  # NaN or negative, only reachable with lenient parsing
        return math.nan
    return math.sqrt(total) / SIZE_DIVISOR


class OrdinalColors:
    """Categorical colors handed out in order of first request, cycling."""

    def __init__(self, palette: Sequence[str] = CATEGORY10) -> None:
        self.palette: List[str] = list(palette)
        self._assigned: Dict[str, str] = {}

    def __call__(self, key: str) -> str:
        if key not in self._assigned:
            self._assigned[key] = self.palette[len(self._assigned) % len(self.palette)]
        return self._assigned[key]

    def domain(self) -> List[str]:
        return list(self._assigned)
