from PyQt5 import QtWidgets

from .CountryRecord import CountryRecord
from .DataSource import CountryDataSource, load_records
from .Errors import DataLoadError, EmptyDatasetError
from .Layout import PlotLayout
from .Scales import LinearScale, OrdinalColors, compute_scales, point_size
from .graphs.ScatterPlot import ScatterPlot
from .canvas.Canvas import Canvas

__all__ = [
    "QtWidgets",
    "CountryRecord",
    "CountryDataSource",
    "load_records",
    "DataLoadError",
    "EmptyDatasetError",
    "PlotLayout",
    "LinearScale",
    "OrdinalColors",
    "compute_scales",
    "point_size",
    "ScatterPlot",
    "Canvas",
]
