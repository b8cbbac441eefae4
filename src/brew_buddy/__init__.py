"""brew-buddy: Filter, illustrate and summarize a beverage catalog."""

from brew_buddy.charts import build_bar_chart
from brew_buddy.core import fetch_catalog
from brew_buddy.filters import apply_filters
from brew_buddy.schema import Beverage, ChartDatum, FilterCriteria, UsageSummary
from brew_buddy.stats import summarize_usage

__version__ = "0.1.0"

__all__ = [
    "apply_filters",
    "build_bar_chart",
    "fetch_catalog",
    "summarize_usage",
    "Beverage",
    "ChartDatum",
    "FilterCriteria",
    "UsageSummary",
    "__version__",
]
