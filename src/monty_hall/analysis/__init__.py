"""Aggregation and presentation of batch results."""

from .proportions import (
    BatchSummary,
    StrategySummary,
    format_summary_table,
    print_summary,
    summarize_batch,
)

__all__ = [
    "BatchSummary",
    "StrategySummary",
    "format_summary_table",
    "print_summary",
    "summarize_batch",
]
