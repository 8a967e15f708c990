"""
Analytics Engine for MockPrep

Aggregates a user's interview history into the dashboard payload:
- Performance over time
- Average score per question category
- Job role distribution
- Practice time
- Most frequent strengths and improvement areas
"""

import logging
from collections import Counter, defaultdict

from mockprep.core.report_generator import round_half_up
from mockprep.models.report import (
    AnalyticsOverview,
    CategoryPerformance,
    InterviewRecord,
    PerformancePoint,
    RoleCount,
)

logger = logging.getLogger(__name__)

TOP_ITEMS = 5


class AnalyticsEngine:
    """Computes dashboard aggregates over stored interview records."""

    def compute(self, records: list[InterviewRecord]) -> AnalyticsOverview:
        """
        Build the analytics overview.

        Args:
            records: Interview records, oldest first

        Returns:
            AnalyticsOverview, all zeros for an empty history
        """
        if not records:
            return AnalyticsOverview()

        scores = [record.effective_score for record in records]
        latest = scores[-1]
        previous = scores[-2] if len(scores) > 1 else latest
        total_seconds = sum(record.time_elapsed for record in records)

        overview = AnalyticsOverview(
            total_interviews=len(records),
            average_score=round_half_up(sum(scores) / len(scores)),
            latest_score=latest,
            score_change=latest - previous,
            total_practice_hours=round(total_seconds / 3600, 1),
            performance=[
                PerformancePoint(
                    interview=i,
                    date=record.completed_at.date().isoformat(),
                    score=score,
                )
                for i, (record, score) in enumerate(zip(records, scores), 1)
            ],
            categories=self._category_performance(records),
            job_roles=[
                RoleCount(role=role, count=count)
                for role, count in Counter(r.job_role for r in records).items()
            ],
            top_strengths=self._top_items(
                s for r in records for a in r.analyses for s in a.strengths
            ),
            top_improvements=self._top_items(
                w for r in records for a in r.analyses for w in a.weaknesses
            ),
        )
        logger.debug(f"Computed analytics over {len(records)} interviews")
        return overview

    def _category_performance(self, records: list[InterviewRecord]) -> list[CategoryPerformance]:
        # Questions without an analysis count as zero
        category_scores: dict[str, list[int]] = defaultdict(list)
        for record in records:
            for index, question in enumerate(record.questions):
                score = record.analyses[index].score if index < len(record.analyses) else 0
                category_scores[question.category].append(score)

        return [
            CategoryPerformance(
                category=category,
                score=round_half_up(sum(scores) / len(scores)),
                count=len(scores),
            )
            for category, scores in category_scores.items()
        ]

    def _top_items(self, items) -> list[str]:
        return [item for item, _ in Counter(items).most_common(TOP_ITEMS)]
