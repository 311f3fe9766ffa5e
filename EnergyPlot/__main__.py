# __main__.py
#
# Launcher for the energy scatterplot window.
#
# Usage examples:
#   python -m EnergyPlot                 (from the repository root)
#   python -m EnergyPlot Examples/scatterdata.csv --labels --verbose

import argparse
import logging
import sys

from PyQt5 import QtWidgets

from EnergyPlot.DataSource import DEFAULT_CSV, CountryDataSource
from EnergyPlot.canvas.Canvas import Canvas


def parse_args(argv):
    p = argparse.ArgumentParser(description="GDP vs. energy consumption scatterplot")
    p.add_argument("csv", nargs="?", default=DEFAULT_CSV,
                   help="CSV with country, population, gdp and ecc columns, relative to the "
                        "current directory (default: %(default)s, the bundled sample).")
    p.add_argument("--lenient", action="store_true",
                   help="Keep rows with non-numeric cells (they are not drawn) instead of failing.")
    p.add_argument("--labels", action="store_true",
                   help="Write the country name next to each point.")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s %(message)s",
    )

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

    canvas = Canvas(show_labels=args.labels)
    source = CountryDataSource(strict=not args.lenient)
    source.data_loaded.connect(canvas.plot)
    source.load_failed.connect(canvas.show_error)

    canvas.show()
    source.load_async(args.csv)
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
