"""
Role, difficulty, and category definitions for MockPrep

Defines the taxonomy used to configure an interview:
- Job roles
- Difficulty levels
- Question categories
- Company types
- Interview styles
"""

from enum import Enum


class JobRole(str, Enum):
    """Target job roles with a question bank."""

    SOFTWARE_ENGINEER = "Software Engineer"
    PRODUCT_MANAGER = "Product Manager"
    DATA_SCIENTIST = "Data Scientist"

    @property
    def family(self) -> str:
        """Role family used for industry-term matching and guidance."""
        return role_family(self.value)


class DifficultyLevel(str, Enum):
    """Difficulty levels a candidate can select."""

    ENTRY = "Entry Level"
    MID = "Mid Level"
    SENIOR = "Senior Level"

    @property
    def experience_range(self) -> str:
        """Expected experience for this level."""
        ranges = {
            "Entry Level": "0-2 years",
            "Mid Level": "2-5 years",
            "Senior Level": "5+ years",
        }
        return ranges.get(self.value, "Unknown")


class QuestionCategory(str, Enum):
    """Question bank categories."""

    TECHNICAL = "Technical"
    PROBLEM_SOLVING = "Problem Solving"
    BEHAVIORAL = "Behavioral"
    SYSTEM_DESIGN = "System Design"
    COMMUNICATION = "Communication"
    PRODUCT_SENSE = "Product Sense"
    ANALYTICAL = "Analytical"
    MIXED = "Mixed"  # No filter, draw from every category


class CompanyType(str, Enum):
    """Kind of company the candidate is preparing for."""

    BIG_TECH = "Big Tech"
    STARTUP = "Startup"
    ENTERPRISE = "Enterprise"
    CONSULTING = "Consulting"
    FINANCE = "Finance"


class InterviewStyle(str, Enum):
    """Interview style options."""

    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    MIXED = "mixed"


# Keywords that signal fluency with a role family's vocabulary
INDUSTRY_TERMS: dict[str, tuple[str, ...]] = {
    "engineering": (
        "scalability", "architecture", "performance",
        "optimization", "microservices", "api",
    ),
    "product": (
        "metrics", "kpi", "user experience",
        "roadmap", "stakeholder", "mvp",
    ),
    "data": (
        "model", "algorithm", "statistical",
        "hypothesis", "correlation", "regression",
    ),
}


def role_family(job_role: str) -> str:
    """
    Map a free-form job role name to a role family.

    Matching is on the role name so that custom titles such as
    "Backend Engineer" still pick up the engineering vocabulary.
    """
    if "Engineer" in job_role:
        return "engineering"
    if "Product" in job_role:
        return "product"
    if "Data" in job_role:
        return "data"
    return "general"


def get_industry_terms(job_role: str) -> tuple[str, ...]:
    """Get the industry vocabulary for a role (empty for unknown roles)."""
    return INDUSTRY_TERMS.get(role_family(job_role), ())
