"""Histogram binning and descriptive summaries of sample sets."""

from __future__ import annotations

from .histogram import DEFAULT_BIN_COUNT, Histogram, histogram
from .summary import SampleSummary, summarize

__all__ = ["DEFAULT_BIN_COUNT", "Histogram", "histogram", "SampleSummary", "summarize"]
