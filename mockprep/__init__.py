"""
MockPrep - Adaptive mock interview backend

Serves role- and difficulty-aware interview questions, analyses answers
with a language model or a deterministic heuristic scorer, and keeps a
history of completed interviews for results and analytics.
"""

__version__ = "0.1.0"
__author__ = "MockPrep Team"
