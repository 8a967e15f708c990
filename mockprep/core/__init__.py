"""
Core business logic modules for MockPrep

Contains:
- Interview Orchestrator: State machine for interview lifecycle
- AI Interviewer: Model-backed decisions with heuristic fallbacks
- Question Selector: Bank selection without repeats
- Follow-up Sequencer: Structured follow-up probes
- Evaluation Engine: Heuristic answer scoring
- Report Generator: Summaries and interview records
- Analytics Engine: Dashboard aggregates
"""

from mockprep.core.interview_orchestrator import InterviewOrchestrator
from mockprep.core.ai_interviewer import AIInterviewer
from mockprep.core.question_selector import QuestionSelector
from mockprep.core.followup_sequencer import FollowUpSequencer
from mockprep.core.evaluation_engine import EvaluationEngine
from mockprep.core.report_generator import ReportGenerator
from mockprep.core.analytics import AnalyticsEngine

__all__ = [
    "InterviewOrchestrator",
    "AIInterviewer",
    "QuestionSelector",
    "FollowUpSequencer",
    "EvaluationEngine",
    "ReportGenerator",
    "AnalyticsEngine",
]
