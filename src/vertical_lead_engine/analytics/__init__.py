"""Batch analytics for scored leads."""

from .summary import ScoreAnalytics, summarize

__all__ = ["ScoreAnalytics", "summarize"]
