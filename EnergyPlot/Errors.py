# Errors.py


class DataLoadError(Exception):
    """
    Raised when the country CSV cannot be turned into records:
    missing or unreadable file, missing columns, or (in strict mode)
    a cell that is not a finite, non-negative number.
    """


class EmptyDatasetError(ValueError):
    """Raised when scales are requested for a dataset without usable values."""
