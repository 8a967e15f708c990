"""
API layer for MockPrep

Contains FastAPI routers for:
- Interview management
- Results retrieval
- Analytics
- Reference metadata
"""

from mockprep.api.router import api_router

__all__ = ["api_router"]
