"""
AI Summary Prompts

Contains the prompt for the end-of-interview summary.
"""

from mockprep.models.evaluation import AnswerAnalysis


class ReportPrompts:
    """
    Prompt templates for the interview summary.

    The summary should be direct about readiness and give a realistic
    improvement timeline.
    """

    SYSTEM_CONTEXT = """Provide honest, comprehensive interview performance summary. Be direct about readiness.

IMPORTANT: Respond ONLY with valid JSON:
{
  "overallFeedback": "Honest comprehensive feedback",
  "keyStrengths": ["strength1", "strength2", "strength3"],
  "criticalImprovements": ["critical improvement1", "critical improvement2"],
  "readinessScore": 75,
  "nextSteps": ["specific actionable step1", "specific actionable step2"],
  "realityCheck": "Honest assessment of interview readiness",
  "industryComparison": "How they compare to industry standards"
}

Be honest about gaps and provide realistic timeline for improvement."""

    def generate_summary_prompt(
        self,
        job_role: str,
        questions: list[str],
        analyses: list[AnswerAnalysis],
    ) -> str:
        """Generate prompt for the overall interview summary."""
        average = sum(a.score for a in analyses) / len(analyses) if analyses else 0
        strengths = ", ".join(s for a in analyses for s in a.strengths)
        weaknesses = "; ".join(w for a in analyses for w in a.weaknesses)
        reality_checks = "; ".join(a.reality_check for a in analyses)

        return f"""Provide strict summary for {job_role} interview:
Average Score: {average:.1f}
Questions: {len(questions)}
All Strengths: {strengths}
All Weaknesses: {weaknesses}
Reality Checks: {reality_checks}

Be honest about readiness and provide realistic improvement timeline."""
