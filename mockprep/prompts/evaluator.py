"""
AI Evaluator Prompt Templates

Contains structured prompts for analysing a single answer.
"""


class EvaluatorPrompts:
    """Prompt templates for AI analysis of answers."""

    SYSTEM_CONTEXT = """Analyze interview responses and provide constructive feedback.

IMPORTANT: Respond ONLY with valid JSON:
{
"score": 85,
"detailedFeedback": "Detailed feedback paragraph",
"strengths": ["strength1", "strength2"],
"weaknesses": ["weakness1", "weakness2"],
"improvementSuggestions": ["suggestion1", "suggestion2"],
"idealAnswer": "Better answer example",
"nextQuestionDirection": "same",
"followUpNeeded": false,
"realityCheck": "Honest assessment",
"industryStandard": "Industry expectations"
}

Scoring: 90-100 excellent, 80-89 good, 70-79 adequate, 60-69 weak, <60 poor"""

    def analyze_answer_prompt(
        self,
        question: str,
        answer: str,
        job_role: str,
        difficulty: str,
    ) -> str:
        return (
            f"Analyze this {job_role} interview response:\n"
            f'Question: "{question}"\n'
            f'Answer: "{answer}"\n'
            f"Difficulty: {difficulty}"
        )
