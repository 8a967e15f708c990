"""
Metadata API endpoints

Provides reference data for:
- Job roles
- Difficulty levels
- Question categories
- Company types
"""

from fastapi import APIRouter
from pydantic import BaseModel

from mockprep.core.difficulty import escalate_difficulty
from mockprep.core.question_bank import get_role_categories
from mockprep.models.roles import CompanyType, DifficultyLevel, JobRole, QuestionCategory

router = APIRouter()


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class RoleInfo(BaseModel):
    """Information about a job role."""
    id: str
    name: str
    family: str
    categories: list[str]


class DifficultyInfo(BaseModel):
    """Information about a difficulty level."""
    id: str
    name: str
    experience_range: str
    questions_asked_at: str


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get("/roles")
async def get_roles() -> list[RoleInfo]:
    """Get all job roles with a question bank."""
    return [
        RoleInfo(
            id=role.name.lower(),
            name=role.value,
            family=role.family,
            categories=get_role_categories(role.value),
        )
        for role in JobRole
    ]


@router.get("/difficulties")
async def get_difficulties() -> list[DifficultyInfo]:
    """Get difficulty levels and the level questions are actually asked at."""
    return [
        DifficultyInfo(
            id=level.name.lower(),
            name=level.value,
            experience_range=level.experience_range,
            questions_asked_at=escalate_difficulty(level.value),
        )
        for level in DifficultyLevel
    ]


@router.get("/categories")
async def get_categories(job_role: str | None = None) -> list[str]:
    """
    Get question categories.

    With a job role, only the categories its bank offers, plus Mixed.
    """
    if job_role:
        return [QuestionCategory.MIXED.value, *get_role_categories(job_role)]
    return [category.value for category in QuestionCategory]


@router.get("/company-types")
async def get_company_types() -> list[str]:
    """Get company types a candidate can target."""
    return [company.value for company in CompanyType]
