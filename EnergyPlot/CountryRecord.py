# CountryRecord.py

import math
from typing import Any, Mapping, NamedTuple

from EnergyPlot.Errors import DataLoadError

# CSV column -> record field. `ecc` feeds both `epc` and the derived total.
NUMERIC_COLUMNS = {
    "population": "population",
    "gdp": "gdp",
    "ecc": "epc",
}
REQUIRED_COLUMNS = ("country", "population", "gdp", "ecc")


class CountryRecord(NamedTuple):
    name: str
    country: str
    population: float  # millions
    gdp: float  # trillion USD
    epc: float  # million BTU per person

    @property
    def total(self) -> float:
        return self.epc * self.population / 1000

    @classmethod
    def from_row(cls, row: Mapping[str, Any], strict: bool = True) -> "CountryRecord":
        """
        Build a record from one CSV row keyed by column name.
        - `name` and `country` both come from the `country` cell.
        - Numeric cells are parsed as floats.
        - strict=True rejects non-numeric, negative or infinite cells
          with a DataLoadError; strict=False lets them through as NaN.
        """
        country = str(row["country"]).strip()
        values = {}
        for column, field in NUMERIC_COLUMNS.items():
            values[field] = _parse_number(row[column], column, country, strict)
        return cls(
            name=country,
            country=country,
            population=values["population"],
            gdp=values["gdp"],
            epc=values["epc"],
        )


def _parse_number(raw: Any, column: str, country: str, strict: bool) -> float:
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        if strict:
            raise DataLoadError(f"{country!r}: column {column!r} is not a number: {raw!r}")
        return math.nan

    if strict and (math.isnan(value) or math.isinf(value) or value < 0):
        raise DataLoadError(f"{country!r}: column {column!r} must be a finite, non-negative number, got {raw!r}")
    return value
