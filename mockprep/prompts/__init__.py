"""
AI prompt templates for MockPrep

Contains structured prompts for:
- Question generation
- Answer analysis
- Interview summary
"""

from mockprep.prompts.interviewer import InterviewerPrompts
from mockprep.prompts.evaluator import EvaluatorPrompts
from mockprep.prompts.report import ReportPrompts

__all__ = [
    "InterviewerPrompts",
    "EvaluatorPrompts",
    "ReportPrompts",
]
