"""Field readers and scorers shared by every industry.

Every scorer takes ``(lead, reference_date)`` and returns an int in [0, 100].
Leads are plain dicts whose fields may be missing or loosely typed, so the
readers here never raise: anything unusable comes back as ``None``.
"""

import math
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

Lead = Dict[str, Any]
Scorer = Callable[[Lead, datetime], int]


def round_half_up(value: float) -> int:
    """Round halves up: 84.5 -> 85."""
    return int(math.floor(value + 0.5))


def clamp(score: float) -> int:
    """Round and bound a score to [0, 100]."""
    return max(0, min(100, round_half_up(score)))


def number(lead: Lead, key: str, default: Optional[float] = None) -> Optional[float]:
    """Read a numeric field; booleans and unparsable strings count as missing."""
    value = lead.get(key)
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        # JSON ints have no size limit; ones past the float range count as missing
        try:
            parsed = float(value)
        except OverflowError:
            return default
        return parsed if math.isfinite(parsed) else default
    if isinstance(value, str):
        cleaned = value.replace(",", "").replace("$", "").strip()
        if not cleaned:
            return default
        try:
            parsed = float(cleaned)
        except ValueError:
            return default
        return parsed if math.isfinite(parsed) else default
    return default


def flag(lead: Lead, key: str) -> Optional[bool]:
    """Read a strict boolean field: True, False, or None when not a bool."""
    value = lead.get(key)
    return value if isinstance(value, bool) else None


def text(lead: Lead, key: str) -> Optional[str]:
    value = lead.get(key)
    return value if isinstance(value, str) and value else None


def items(lead: Lead, key: str) -> Optional[List[Any]]:
    """Read a multi-select field as a list, or None if it isn't one."""
    value = lead.get(key)
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a datetime, date or ISO-8601 string to a naive UTC datetime."""
    if isinstance(value, datetime):
        return _naive_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            return _naive_utc(datetime.fromisoformat(raw))
        except ValueError:
            return None
    return None


def days_between(later: datetime, earlier: datetime) -> float:
    """Fractional days from ``earlier`` to ``later`` (negative if reversed)."""
    delta = _naive_utc(later) - _naive_utc(earlier)
    return delta.total_seconds() / 86400


def bucket(value: float, table: Sequence[Tuple[float, int]], below: int) -> int:
    """Return the score for the first ``(threshold, score)`` pair with value >= threshold.

    Tables are ordered by descending threshold; ``below`` applies when no
    threshold matches.
    """
    for threshold, score in table:
        if value >= threshold:
            return score
    return below


def lookup(value: Optional[str], table: Dict[str, int], default: int) -> int:
    if value is None:
        return default
    return table.get(value, default)


# Lead-source quality bonus for engagement
SOURCE_BOOST: Dict[str, int] = {
    "Referral": 15,
    "Website": 10,
    "LinkedIn": 8,
    "Outbound": 5,
    "Native Ad": 5,
    "Database": 3,
}


def score_engagement(lead: Lead, reference_date: datetime) -> int:
    """Interaction volume, contact recency and source quality."""
    score = 20

    interactions = number(lead, "interactions", 0) or 0
    score += bucket(interactions, [(10, 30), (5, 25), (3, 15), (1, 10)], 0)

    last_contact = parse_date(lead.get("lastContact"))
    if last_contact is not None:
        days_since = days_between(reference_date, last_contact)
        if days_since <= 1:
            score += 30
        elif days_since <= 3:
            score += 25
        elif days_since <= 7:
            score += 20
        elif days_since <= 14:
            score += 10
        elif days_since <= 30:
            score += 5

    score += lookup(text(lead, "source"), SOURCE_BOOST, 0)
    return clamp(score)


def score_geographic_fit(lead: Lead, reference_date: datetime) -> int:
    if lead.get("state") or lead.get("zipCode"):
        return 65
    return 40
