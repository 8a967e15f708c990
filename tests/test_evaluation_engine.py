import pytest

from mockprep.core.evaluation_engine import (
    FOLLOW_UP_REASON,
    AnswerFeatures,
    EvaluationEngine,
    get_industry_standard,
    length_contribution,
    raw_score,
    score_answer,
)
from mockprep.models.evaluation import NextQuestionDirection, ScoreBand

STRONG_ANSWER = (
    "For example, in my last role I led the architecture work on our checkout service. "
    "My approach was to profile first. We cut p99 latency by 40% and saved $20k per month. "
    "I split the monolith into microservices behind a gateway for scalability. "
    "The process took three months and taught me a lot about performance tradeoffs."
)

# 91 characters, one digit, no other features
PLAIN_ANSWER = (
    "The service handled 200 requests per second after we added caching to the slowest endpoints"
)


def test_yes_scores_minimum():
    assert score_answer("yes", "Software Engineer") == 30


@pytest.mark.parametrize("answer", ["", "yes", "x" * 49, "I think it works.", "  padded   "])
def test_short_answers_lose_twenty_points_for_length(answer):
    features = AnswerFeatures.extract(answer, "Software Engineer")
    assert features.length < 50
    assert length_contribution(features) == -20


def test_length_uses_stripped_text():
    features = AnswerFeatures.extract(" " * 100 + "ok" + " " * 100, "Software Engineer")
    assert features.length == 2


@pytest.mark.parametrize(
    "length, expected",
    [(49, -20), (50, 0), (150, 0), (151, 10), (300, 10), (301, 15)],
)
def test_length_thresholds(length, expected):
    features = AnswerFeatures.extract("z" * length, "Product Manager")
    assert length_contribution(features) == expected


@pytest.mark.parametrize(
    "answer, job_role",
    [
        ("yes", "Software Engineer"),
        ("", "Data Scientist"),
        ("it depends", "Product Manager"),
        (PLAIN_ANSWER, "Software Engineer"),
        (STRONG_ANSWER, "Software Engineer"),
        (STRONG_ANSWER * 3, "Data Scientist"),
        ("I think maybe. Probably. It depends. Not sure.", "Chef"),
    ],
)
def test_scores_are_clamped(answer, job_role):
    assert 30 <= score_answer(answer, job_role) <= 95


def test_strong_answer_hits_every_feature_and_clamps_to_max():
    features = AnswerFeatures.extract(STRONG_ANSWER, "Software Engineer")
    assert features.has_examples
    assert features.has_specifics
    assert features.has_methodology
    assert features.shows_depth
    assert features.uses_industry_terms
    assert raw_score(features) > 95
    assert score_answer(STRONG_ANSWER, "Software Engineer") == 95


def test_plain_answer_exact_score():
    assert score_answer(PLAIN_ANSWER, "Software Engineer") == 60


def test_hedging_penalties():
    # 50 - 20 (short) - 10 ("it depends" under 100 chars)
    assert raw_score(AnswerFeatures.extract("it depends", "Software Engineer")) == 20
    # 50 - 20 (short) - 5 ("i think" without examples)
    assert raw_score(AnswerFeatures.extract("I think so", "Software Engineer")) == 25
    # "i think" with an example is not penalised
    assert raw_score(AnswerFeatures.extract("I think, for example", "Software Engineer")) == 45


def test_industry_terms_depend_on_role():
    answer = "We tracked the kpi weekly"
    assert AnswerFeatures.extract(answer, "Product Manager").uses_industry_terms
    assert not AnswerFeatures.extract(answer, "Software Engineer").uses_industry_terms
    assert not AnswerFeatures.extract(answer, "Chef").uses_industry_terms


class TestEvaluationEngine:
    def setup_method(self):
        self.engine = EvaluationEngine()

    def test_minimal_answer_analysis(self):
        analysis = self.engine.evaluate_answer("Q?", "yes", "Software Engineer", "Entry Level")

        assert analysis.score == 30
        assert analysis.band == ScoreBand.UNREADY
        assert analysis.next_question_direction == NextQuestionDirection.EASIER
        assert analysis.follow_up_needed
        assert analysis.follow_up_reason == FOLLOW_UP_REASON
        assert analysis.strengths == ["Attempted to answer the question"]
        assert "No concrete examples provided" in analysis.weaknesses
        assert "Answer too brief for the question complexity" in analysis.weaknesses
        assert analysis.detailed_feedback.startswith("Poor response")
        assert analysis.reality_check.startswith("This response suggests")

    def test_strong_answer_analysis(self):
        analysis = self.engine.evaluate_answer("Q?", STRONG_ANSWER, "Software Engineer", "Mid Level")

        assert analysis.score == 95
        assert analysis.next_question_direction == NextQuestionDirection.HARDER
        assert not analysis.follow_up_needed
        assert analysis.follow_up_reason is None
        assert "Provided concrete examples" in analysis.strengths
        assert "Comprehensive response" in analysis.strengths
        assert analysis.detailed_feedback == "Strong response that demonstrates good understanding."
        assert analysis.industry_standard == get_industry_standard("Software Engineer", "Mid Level")

    def test_plain_answer_is_same_direction(self):
        analysis = self.engine.evaluate_answer("Q?", PLAIN_ANSWER, "Software Engineer", "Entry Level")

        assert analysis.score == 60
        assert analysis.next_question_direction == NextQuestionDirection.SAME
        assert analysis.follow_up_needed

    def test_padding_counts_for_feedback_but_not_for_score(self):
        analysis = self.engine.evaluate_answer("Q?", "yes" + " " * 250, "Software Engineer", "Entry Level")

        assert analysis.score == 30
        assert analysis.strengths == ["Comprehensive response"]
        assert "Answer too brief for the question complexity" not in analysis.weaknesses
        assert "interviewers expect more comprehensive responses" not in analysis.detailed_feedback
        assert not any(s.startswith("Practice giving more") for s in analysis.improvement_suggestions)

    def test_suggestions_include_role_and_general_advice(self):
        analysis = self.engine.evaluate_answer("Q?", "yes", "Data Scientist", "Entry Level")

        assert analysis.improvement_suggestions[0] == (
            "Study fundamental concepts more deeply before interviewing"
        )
        assert "Prepare examples of end-to-end data science projects" in analysis.improvement_suggestions
        assert analysis.improvement_suggestions[-2:] == [
            "Research the company and role-specific challenges",
            "Practice with mock interviews to improve confidence and delivery",
        ]

    def test_ideal_answer_names_role(self):
        analysis = self.engine.evaluate_answer("Q?", "yes", "Product Manager", "Entry Level")
        assert "appropriate for a Product Manager role" in analysis.ideal_answer


def test_unknown_role_gets_default_industry_standard():
    assert get_industry_standard("Chef", "Entry Level").startswith("Industry expects")
    assert get_industry_standard("Software Engineer", "Staff").startswith("Industry expects")
