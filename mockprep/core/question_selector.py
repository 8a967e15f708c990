"""
Question Selector for MockPrep

Picks unused questions from the static bank, remembering which ids were
served in the current session.
"""

import logging
import random

from mockprep.core.difficulty import describe_escalation, escalate_difficulty
from mockprep.core.question_bank import (
    get_category_for_question,
    get_difficulty_cell,
    get_frequently_asked,
)
from mockprep.models.interview import InterviewContext
from mockprep.models.question import (
    GeneratedQuestion,
    QuestionBankEntry,
    QuestionKind,
    QuestionSource,
)
from mockprep.models.roles import QuestionCategory

logger = logging.getLogger(__name__)


class QuestionSelector:
    """
    Selects bank questions without repeats.

    Never fails as long as the fallback cell of the bank is populated:
    when every candidate has been served, the used set is cleared and
    selection starts over on the full pool.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def build_pool(
        self,
        job_role: str,
        difficulty: str,
        category: str | None = None,
        requested_difficulty: str | None = None,
    ) -> list[QuestionBankEntry]:
        """Gather every candidate entry for a role, difficulty and category."""
        difficulties = [difficulty]
        if requested_difficulty:
            difficulties.append(requested_difficulty)
        cell = get_difficulty_cell(job_role, *difficulties)

        if category and category != QuestionCategory.MIXED.value:
            pool = list(cell.get(category, [])) + get_frequently_asked(job_role, category)
            if pool:
                return pool
            logger.warning(
                f"No questions for category '{category}' ({job_role}, {difficulty}), "
                f"using all categories"
            )

        pool = [entry for entries in cell.values() for entry in entries]
        pool.extend(get_frequently_asked(job_role))
        return pool

    def select(
        self,
        job_role: str,
        difficulty: str,
        used_ids: set[str],
        category: str | None = None,
        requested_difficulty: str | None = None,
    ) -> QuestionBankEntry:
        """
        Pick an unused entry uniformly at random.

        Adds the chosen id to ``used_ids``.
        """
        pool = self.build_pool(job_role, difficulty, category, requested_difficulty)
        unused = [entry for entry in pool if entry.id not in used_ids]

        if not unused:
            logger.warning("All questions used, resetting question pool")
            used_ids.clear()
            unused = pool

        selected = self.rng.choice(unused)
        used_ids.add(selected.id)
        return selected

    def generate_question(self, context: InterviewContext) -> GeneratedQuestion:
        """Select the next main question for an interview."""
        actual_difficulty = escalate_difficulty(context.difficulty_level)
        entry = self.select(
            job_role=context.job_role,
            difficulty=actual_difficulty,
            used_ids=context.used_question_ids,
            category=context.question_category,
            requested_difficulty=context.difficulty_level,
        )

        style = f"{entry.company} style" if entry.company else "Advanced"
        return GeneratedQuestion(
            question=entry.text,
            question_type=QuestionKind.MAIN,
            category=get_category_for_question(entry.text),
            expected_duration=4,
            difficulty=context.difficulty_level,
            actual_difficulty=describe_escalation(context.difficulty_level),
            context=f"{style} {actual_difficulty} question - {entry.variant_type}",
            question_id=entry.id,
            source=QuestionSource.BANK,
        )
