"""Dimension scorers, grouped by industry."""

from .common import Lead, Scorer, clamp, score_engagement, score_geographic_fit

__all__ = [
    "Lead",
    "Scorer",
    "clamp",
    "score_engagement",
    "score_geographic_fit",
]
