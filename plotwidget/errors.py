from __future__ import annotations


class PlotError(Exception):
    """Base class for plotwidget errors."""


class PlotConfigError(PlotError, ValueError):
    """Raised when plot options are inconsistent or out of range."""


class PlotDataError(PlotError, ValueError):
    """Raised when array-like input cannot be coerced into curve columns."""
