"""Repository layer - data access abstraction."""

from src.hirehub.repositories.base import BaseRepository
from src.hirehub.repositories.company import CompanyInfoRepository, CompanyRepository
from src.hirehub.repositories.estimate import EstimateRepository
from src.hirehub.repositories.project import ProjectRepository, TechRepository
from src.hirehub.repositories.project_tech import ProjectTechRepository, ProjectTechRow
from src.hirehub.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    # Accounts
    "CompanyInfoRepository",
    "CompanyRepository",
    "UserRepository",
    # Listings
    "ProjectRepository",
    "ProjectTechRepository",
    "ProjectTechRow",
    "TechRepository",
    # Ratings
    "EstimateRepository",
]
