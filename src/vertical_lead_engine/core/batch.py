"""Batch scoring of many leads for one sub-vertical."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from .engine import LeadScoringEngine, get_default_engine
from .models import ScoreResult

logger = logging.getLogger(__name__)

RESULT_KEYS = (
    "score",
    "grade",
    "recommendedStatus",
    "conversionProbability",
    "scoreBreakdown",
    "qualificationFlags",
    "nextBestAction",
    "boost",
)


def merge_result(lead: Dict[str, Any], result: ScoreResult) -> Dict[str, Any]:
    """New dict with the lead's own fields plus the scoring output."""
    rendered = result.to_dict()
    scored = dict(lead)
    for key in RESULT_KEYS:
        scored[key] = rendered[key]
    return scored


def score_batch(
    leads: Iterable[Dict[str, Any]],
    industry_id: str,
    sub_vertical_id: str,
    reference_date: Optional[datetime] = None,
    engine: Optional[LeadScoringEngine] = None,
    max_workers: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Score every lead and return them ranked by score, highest first.

    The reference date is fixed once so every lead in the batch is scored
    against the same day. Leads with equal scores keep their input order.
    """
    engine = engine or get_default_engine()
    reference_date = reference_date or datetime.now()
    workers = max_workers if max_workers is not None else engine.settings.max_workers
    leads = list(leads)

    def _score(lead: Dict[str, Any]) -> Dict[str, Any]:
        return merge_result(lead, engine.score(lead, industry_id, sub_vertical_id, reference_date))

    if workers > 1 and len(leads) > 1:
        logger.debug(f"Scoring {len(leads)} leads on {workers} threads")
        with ThreadPoolExecutor(max_workers=workers) as pool:
            scored = list(pool.map(_score, leads))
    else:
        scored = [_score(lead) for lead in leads]

    # sorted() is stable, so ties stay in input order
    scored = sorted(scored, key=lambda s: s["score"], reverse=True)
    logger.info(f"Scored {len(scored)} leads for {industry_id}/{sub_vertical_id}")
    return scored
