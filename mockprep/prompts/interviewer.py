"""
AI Interviewer Prompt Templates

Contains structured prompts for generating the next main question.
The system prompt fixes the JSON output contract; the user prompt adapts
the question to the candidate's running performance.
"""

from mockprep.models.interview import InterviewContext
from mockprep.models.roles import role_family

# Scores assumed before the first answer
DEFAULT_AVERAGE_SCORE = 75

ROLE_GUIDANCE = {
    "engineering": (
        "Focus on complex system design, scalability challenges, or advanced "
        "technical concepts that senior engineers face."
    ),
    "product": (
        "Focus on strategic product decisions, complex trade-offs, or scenarios "
        "with ambiguous requirements."
    ),
    "data": (
        "Focus on advanced statistical concepts, complex data problems, or "
        "real-world ML challenges."
    ),
}


class InterviewerPrompts:
    """
    Prompt templates for the AI interviewer.

    Key principles:
    - Questions one level above the selected difficulty
    - Harder when the candidate is doing well
    - Never repeat a recent question
    """

    SYSTEM_TEMPLATE = """You are an expert interviewer for {job_role} positions. Generate realistic interview questions.

IMPORTANT: Respond ONLY with valid JSON in this exact format:
{{
"question": "Your interview question here",
"questionType": "main",
"category": "Technical",
"expectedDuration": 3,
"difficulty": "{difficulty}",
"actualDifficulty": "{actual_difficulty}",
"context": "Brief explanation"
}}

Guidelines:
- {actual_difficulty} level questions for {job_role}
- Make questions realistic and commonly asked
- Avoid repeating previous questions: {recent_questions}"""

    def system_prompt(self, context: InterviewContext, actual_difficulty: str) -> str:
        return self.SYSTEM_TEMPLATE.format(
            job_role=context.job_role,
            difficulty=context.difficulty_level,
            actual_difficulty=actual_difficulty,
            recent_questions=", ".join(context.previous_questions[-3:]),
        )

    def generate_question_prompt(self, context: InterviewContext, actual_difficulty: str) -> str:
        """Generate prompt for creating the next interview question."""
        average = context.average_score
        if average is None:
            average = DEFAULT_AVERAGE_SCORE

        parts = [f"Generate a challenging {actual_difficulty} interview question for {context.job_role}."]

        if context.current_question_number == 1:
            parts.append(
                "Start with a complex opening question that immediately tests their depth of knowledge."
            )
        elif average > 80:
            parts.append(
                "Candidate is doing well - make this question significantly harder to really test their limits."
            )
        elif average < 60:
            parts.append(
                "Candidate is struggling - but maintain the challenging level to see if they can rise to the occasion."
            )
        else:
            parts.append(
                "Candidate is average - push them with a question that separates good from great."
            )

        guidance = ROLE_GUIDANCE.get(role_family(context.job_role))
        if guidance:
            parts.append(guidance)

        if context.question_category and context.question_category != "Mixed":
            parts.append(f"The question must be in the {context.question_category} category.")
        if context.company_type:
            parts.append(f"Tailor it to a {context.company_type} company.")

        parts.append(
            "Make it a question that would be asked at top-tier companies like Google, Amazon, or Netflix."
        )
        return " ".join(parts)
