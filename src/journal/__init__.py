from .export import JournalExporter
from .forecast import ForecastPoint, ForecastResult, compute_forecast
from .storage import JournalStorage

__all__ = [
    "JournalStorage",
    "JournalExporter",
    "ForecastPoint",
    "ForecastResult",
    "compute_forecast",
]
