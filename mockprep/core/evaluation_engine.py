"""
Evaluation Engine for MockPrep

Heuristic answer scoring used whenever the language model is unavailable
or returns something unusable. Scoring is a pure function of the answer
text and the job role: no I/O and no randomness.

Every derived string (strengths, weaknesses, suggestions, reality check)
comes from the rule tables below, keyed by answer features and score band.
"""

import logging
import re
from typing import Callable

from pydantic import BaseModel, ConfigDict

from mockprep.models.evaluation import AnswerAnalysis, NextQuestionDirection, ScoreBand
from mockprep.models.roles import get_industry_terms, role_family

logger = logging.getLogger(__name__)

BASE_SCORE = 50
MIN_SCORE = 30
MAX_SCORE = 95

FOLLOW_UP_THRESHOLD = 75
FOLLOW_UP_REASON = "Need to probe deeper to assess true understanding"

_DIGIT = re.compile(r"\d")


class AnswerFeatures(BaseModel):
    """Surface features of a free-text answer."""

    model_config = ConfigDict(frozen=True)

    length: int  # stripped, used for scoring
    raw_length: int  # as typed, used for feedback text
    has_examples: bool
    has_specifics: bool
    has_methodology: bool
    shows_depth: bool
    uses_industry_terms: bool
    says_it_depends: bool
    says_i_think: bool
    mentions_example: bool
    is_vague: bool

    @classmethod
    def extract(cls, answer: str, job_role: str) -> "AnswerFeatures":
        lower = answer.lower()
        return cls(
            length=len(answer.strip()),
            raw_length=len(answer),
            has_examples="example" in lower or "experience" in lower,
            has_specifics=bool(_DIGIT.search(answer)) or "%" in answer or "$" in answer,
            has_methodology=any(kw in lower for kw in ("approach", "process", "method")),
            # More than three "."-separated segments
            shows_depth=len(answer.split(".")) > 3,
            uses_industry_terms=any(term in lower for term in get_industry_terms(job_role)),
            says_it_depends="it depends" in lower,
            says_i_think="i think" in lower,
            mentions_example="example" in lower,
            is_vague=any(p in lower for p in ("it depends", "i think", "maybe", "probably")),
        )


Rule = Callable[[AnswerFeatures], bool]

# ============================================================================
# SCORING TABLES
# ============================================================================

# First matching rule wins
LENGTH_WEIGHTS: tuple[tuple[Rule, int], ...] = (
    (lambda f: f.length > 300, 15),
    (lambda f: f.length > 150, 10),
    (lambda f: f.length < 50, -20),
)

# Every matching rule applies
FEATURE_WEIGHTS: tuple[tuple[Rule, int], ...] = (
    (lambda f: f.has_examples, 15),
    (lambda f: f.has_specifics, 10),
    (lambda f: f.has_methodology, 10),
    (lambda f: f.shows_depth, 10),
    (lambda f: f.uses_industry_terms, 10),
    # Generic answers
    (lambda f: f.says_it_depends and f.length < 100, -10),
    (lambda f: f.says_i_think and not f.has_examples, -5),
)


def length_contribution(features: AnswerFeatures) -> int:
    for rule, weight in LENGTH_WEIGHTS:
        if rule(features):
            return weight
    return 0


def raw_score(features: AnswerFeatures) -> int:
    """Score before clamping."""
    score = BASE_SCORE + length_contribution(features)
    score += sum(weight for rule, weight in FEATURE_WEIGHTS if rule(features))
    return score


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def score_answer(answer: str, job_role: str) -> int:
    """Heuristic 30-95 score for an answer."""
    return clamp_score(raw_score(AnswerFeatures.extract(answer, job_role)))


# ============================================================================
# FEEDBACK TABLES
# ============================================================================

FEEDBACK_OPENERS: dict[ScoreBand, str] = {
    ScoreBand.STRONG: "Strong response that demonstrates good understanding.",
    ScoreBand.ADEQUATE: "Adequate response that covers the basics.",
    ScoreBand.WEAK: "Weak response with significant gaps.",
    ScoreBand.POOR: "Poor response that doesn't meet expectations.",
    ScoreBand.UNREADY: "Poor response that doesn't meet expectations.",
}

FEEDBACK_ISSUES: tuple[tuple[Rule, str], ...] = (
    (lambda f: not f.has_examples,
     "Your answer lacks concrete examples, which makes it difficult to assess your actual experience."),
    (lambda f: not f.has_specifics,
     "You need to include specific metrics, numbers, or technical details to demonstrate depth."),
    (lambda f: not f.shows_depth,
     "Your response is too surface-level for this type of question."),
    (lambda f: f.raw_length < 100,
     "Your answer is too brief - interviewers expect more comprehensive responses."),
)

STRENGTH_RULES: tuple[tuple[Rule, str], ...] = (
    (lambda f: f.has_examples, "Provided concrete examples"),
    (lambda f: f.has_specifics, "Included specific details and metrics"),
    (lambda f: f.has_methodology, "Described systematic approach"),
    (lambda f: f.uses_industry_terms, "Used appropriate technical terminology"),
    (lambda f: f.raw_length > 200, "Comprehensive response"),
)
DEFAULT_STRENGTH = "Attempted to answer the question"

WEAKNESS_RULES: tuple[tuple[Callable[[AnswerFeatures, int], bool], str], ...] = (
    (lambda f, s: not f.has_examples, "No concrete examples provided"),
    (lambda f, s: not f.has_specifics, "Lacks specific metrics or details"),
    (lambda f, s: not f.shows_depth, "Response too surface-level"),
    (lambda f, s: f.raw_length < 100, "Answer too brief for the question complexity"),
    (lambda f, s: s < 70, "Doesn't demonstrate required depth of knowledge"),
    (lambda f, s: f.is_vague, "Too many vague or uncertain statements"),
)

SUGGESTION_RULES: tuple[tuple[Callable[[AnswerFeatures, int], bool], str], ...] = (
    (lambda f, s: s < 70, "Study fundamental concepts more deeply before interviewing"),
    (lambda f, s: not f.mentions_example, "Prepare 3-5 detailed STAR method examples for different scenarios"),
    (lambda f, s: f.raw_length < 150, "Practice giving more comprehensive answers (2-3 minutes speaking time)"),
)

ROLE_SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "engineering": (
        "Practice system design problems and architectural thinking",
        "Prepare examples of complex technical challenges you've solved",
    ),
    "product": (
        "Prepare examples of data-driven product decisions",
        "Practice explaining complex trade-offs and prioritization frameworks",
    ),
    "data": (
        "Prepare examples of end-to-end data science projects",
        "Practice explaining technical concepts to non-technical audiences",
    ),
}

GENERAL_SUGGESTIONS: tuple[str, ...] = (
    "Research the company and role-specific challenges",
    "Practice with mock interviews to improve confidence and delivery",
)

REALITY_CHECKS: dict[ScoreBand, str] = {
    ScoreBand.STRONG: "Strong performance - you're demonstrating the depth expected for this role.",
    ScoreBand.ADEQUATE: "Decent answer, but top companies will expect more depth and specific examples.",
    ScoreBand.WEAK: "Your answer shows basic understanding, but lacks the sophistication needed for competitive roles.",
    ScoreBand.POOR: "Significant gaps evident. You'll need substantial preparation before interviewing at target companies.",
    ScoreBand.UNREADY: "This response suggests you may not be ready for this level of role. Consider focusing on fundamentals first.",
}

INDUSTRY_STANDARDS: dict[str, dict[str, str]] = {
    "Software Engineer": {
        "Entry Level": "Entry-level engineers should demonstrate solid coding fundamentals, basic system design understanding, and ability to learn quickly.",
        "Mid Level": "Mid-level engineers must show system design skills, leadership potential, and ability to handle complex technical challenges independently.",
        "Senior Level": "Senior engineers need to demonstrate architectural thinking, mentorship capabilities, and ability to drive technical strategy.",
    },
    "Product Manager": {
        "Entry Level": "Entry-level PMs should show analytical thinking, user empathy, and basic understanding of product development lifecycle.",
        "Mid Level": "Mid-level PMs must demonstrate strategic thinking, stakeholder management, and ability to drive product decisions with data.",
        "Senior Level": "Senior PMs need to show vision-setting abilities, cross-functional leadership, and deep market understanding.",
    },
    "Data Scientist": {
        "Entry Level": "Entry-level data scientists should demonstrate statistical knowledge, programming skills, and ability to derive insights from data.",
        "Mid Level": "Mid-level data scientists must show advanced modeling skills, business acumen, and ability to deploy production systems.",
        "Senior Level": "Senior data scientists need to demonstrate strategic thinking, team leadership, and ability to drive data strategy.",
    },
}
DEFAULT_INDUSTRY_STANDARD = (
    "Industry expects strong technical skills, clear communication, and proven ability to deliver results."
)


def get_industry_standard(job_role: str, difficulty: str) -> str:
    return INDUSTRY_STANDARDS.get(job_role, {}).get(difficulty, DEFAULT_INDUSTRY_STANDARD)


def next_direction(score: int) -> NextQuestionDirection:
    if score >= 80:
        return NextQuestionDirection.HARDER
    elif score < 60:
        return NextQuestionDirection.EASIER
    return NextQuestionDirection.SAME


class EvaluationEngine:
    """
    Heuristic evaluation of interview answers.

    Used directly when no language model is configured and as the
    fallback for every failed model call.
    """

    def evaluate_answer(
        self,
        question: str,
        answer: str,
        job_role: str,
        difficulty: str,
    ) -> AnswerAnalysis:
        """
        Score an answer and build the full analysis.

        Args:
            question: The question that was asked
            answer: Candidate's free-text answer
            job_role: Target role, selects the industry vocabulary
            difficulty: Difficulty the candidate selected

        Returns:
            Complete AnswerAnalysis
        """
        features = AnswerFeatures.extract(answer, job_role)
        score = clamp_score(raw_score(features))
        band = ScoreBand.for_score(score)
        follow_up_needed = score < FOLLOW_UP_THRESHOLD

        logger.debug(f"Heuristic score {score} ({band.value}) for {features.length}-char answer")

        return AnswerAnalysis(
            score=score,
            detailed_feedback=self._build_feedback(features, band),
            strengths=self._identify_strengths(features),
            weaknesses=[text for rule, text in WEAKNESS_RULES if rule(features, score)],
            improvement_suggestions=self._build_suggestions(features, score, job_role),
            ideal_answer=self._ideal_answer(job_role),
            next_question_direction=next_direction(score),
            follow_up_needed=follow_up_needed,
            follow_up_reason=FOLLOW_UP_REASON if follow_up_needed else None,
            reality_check=REALITY_CHECKS[band],
            industry_standard=get_industry_standard(job_role, difficulty),
        )

    def _build_feedback(self, features: AnswerFeatures, band: ScoreBand) -> str:
        parts = [FEEDBACK_OPENERS[band]]
        parts.extend(text for rule, text in FEEDBACK_ISSUES if rule(features))
        return " ".join(parts)

    def _identify_strengths(self, features: AnswerFeatures) -> list[str]:
        strengths = [text for rule, text in STRENGTH_RULES if rule(features)]
        return strengths or [DEFAULT_STRENGTH]

    def _build_suggestions(self, features: AnswerFeatures, score: int, job_role: str) -> list[str]:
        suggestions = [text for rule, text in SUGGESTION_RULES if rule(features, score)]
        suggestions.extend(ROLE_SUGGESTIONS.get(role_family(job_role), ()))
        suggestions.extend(GENERAL_SUGGESTIONS)
        return suggestions

    def _ideal_answer(self, job_role: str) -> str:
        return (
            "A strong answer would include: (1) A clear framework or approach, "
            "(2) Specific examples from your experience with measurable outcomes, "
            "(3) Discussion of trade-offs and alternatives considered, "
            "(4) Lessons learned and how you'd apply them differently, "
            "(5) Connection to business impact or user value. "
            "The response should be 2-3 minutes long and demonstrate both technical depth "
            f"and strategic thinking appropriate for a {job_role} role."
        )
