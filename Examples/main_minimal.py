# main_minimal.py

import os
import sys

from PyQt5 import QtWidgets

from EnergyPlot import Canvas, load_records

CSV_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "scatterdata.csv")

records = load_records(CSV_PATH)

# Standard Qt application
app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

# Create a canvas and draw the scatterplot onto it
canvas = Canvas()
canvas.plot(records)
canvas.show()

# Run the event loop
sys.exit(app.exec_())
