"""Model exports.

Import from here: `from src.hirehub.models import Company, Project`
"""

from src.hirehub.models.company import Company, CompanyInfo
from src.hirehub.models.estimate import Estimate
from src.hirehub.models.project import Project, ProjectTech, Tech
from src.hirehub.models.user import User

__all__ = [
    # Accounts
    "Company",
    "CompanyInfo",
    "User",
    # Listings
    "Project",
    "ProjectTech",
    "Tech",
    # Ratings
    "Estimate",
]
