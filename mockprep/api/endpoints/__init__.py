"""
API endpoint modules for MockPrep
"""

from mockprep.api.endpoints import analytics, interview, metadata, results

__all__ = ["analytics", "interview", "metadata", "results"]
