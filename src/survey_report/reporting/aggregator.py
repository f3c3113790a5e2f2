"""Aggregate decoded surveys into a single :class:`Report`."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from enum import Enum
from typing import Dict, Iterable, List, Optional

from survey_report.parsing.fields import (
    CATEGORY_FIELDS,
    COMMENT_FIELDS,
    OVERALL_FIELD,
    RECOMMENDATION_FIELD,
)
from survey_report.reporting import config
from survey_report.reporting.models import Report
from survey_report.survey_data import SurveyRecord

logger = logging.getLogger(__name__)


class NPSBucket(str, Enum):
    PROMOTER = "promoter"
    PASSIVE = "passive"
    DETRACTOR = "detractor"


def nps(promoters: int, passives: int, detractors: int) -> Optional[float]:
    """Return the Net Promoter Score for the given bucket counts.

    The score ranges from -100 (everybody is a detractor) to 100 (everybody
    is a promoter). Returns ``None`` when all counts are zero.
    """
    total = promoters + passives + detractors
    if total == 0:
        return None
    return (promoters - detractors) / total * 100


def classify_recommendation(score: Optional[int]) -> Optional[NPSBucket]:
    """Bucket a 0–10 recommendation answer; ``None`` if it cannot be classified."""
    if score is None or not 0 <= score <= 10:
        return None
    if score >= 9:
        return NPSBucket.PROMOTER
    if score >= 7:
        return NPSBucket.PASSIVE
    return NPSBucket.DETRACTOR


def _category_mean(survey: SurveyRecord, fields: Iterable[str]) -> float:
    scores = [survey.score(f) for f in fields]
    return sum(scores) / len(scores)


def build_report(
    surveys: Iterable[SurveyRecord],
    *,
    count_missing_as_detractor: Optional[bool] = None,
) -> Report:
    """Convert *surveys* into a :class:`Report` in one pass.

    Every survey counts towards ``responses`` and the category averages,
    with absent scores taken as 0. Recommendation answers that cannot be
    classified are left out of the NPS unless *count_missing_as_detractor*
    (default: :data:`config.COUNT_MISSING_AS_DETRACTOR`) is set.
    """

    if count_missing_as_detractor is None:
        count_missing_as_detractor = config.COUNT_MISSING_AS_DETRACTOR

    sums: Dict[str, float] = {name: 0.0 for name in CATEGORY_FIELDS}
    overall_sum = 0.0
    buckets: Counter[NPSBucket] = Counter()
    unclassified = 0
    comments: Dict[str, Dict[str, List[str]]] = {
        category: defaultdict(list) for category in COMMENT_FIELDS
    }

    responses = 0
    for survey in surveys:
        responses += 1

        for category, fields in CATEGORY_FIELDS.items():
            sums[category] += _category_mean(survey, fields)
        overall_sum += survey.score(OVERALL_FIELD)

        bucket = classify_recommendation(getattr(survey, RECOMMENDATION_FIELD))
        if bucket is None and count_missing_as_detractor:
            bucket = NPSBucket.DETRACTOR
        if bucket is None:
            unclassified += 1
        else:
            buckets[bucket] += 1

        for category, field_name in COMMENT_FIELDS.items():
            text = getattr(survey, field_name).strip()
            if text:
                comments[category][survey.respondent].append(text)

    if responses == 0:
        logger.warning("No surveys to aggregate; reporting empty averages")
        return Report(responses=0)

    score = nps(
        buckets[NPSBucket.PROMOTER],
        buckets[NPSBucket.PASSIVE],
        buckets[NPSBucket.DETRACTOR],
    )
    if score is None:
        logger.warning(
            "None of %d surveys had a usable recommendation answer; NPS unavailable",
            responses,
        )

    return Report(
        responses=responses,
        curriculum_avg=sums["curriculum"] / responses,
        instructor_avg=sums["instructor"] / responses,
        environment_avg=sums["environment"] / responses,
        overall_avg=overall_sum / responses,
        nps=score,
        promoters=buckets[NPSBucket.PROMOTER],
        passives=buckets[NPSBucket.PASSIVE],
        detractors=buckets[NPSBucket.DETRACTOR],
        unclassified=unclassified,
        curriculum_comments=dict(comments["curriculum"]),
        instructor_comments=dict(comments["instructor"]),
        environment_comments=dict(comments["environment"]),
        overall_comments=dict(comments["overall"]),
    )
