from src.hirehub.schemas.auth import AccountType, LoginRequest, LoginResponse
from src.hirehub.schemas.company import (
    CompanyCreate,
    CompanyInfoCreate,
    CompanyInfoRead,
    CompanyRead,
)
from src.hirehub.schemas.estimate import EstimateCreate, EstimateRead, EstimateSummary
from src.hirehub.schemas.pagination import Page, PageParams
from src.hirehub.schemas.project import ProjectCreate, ProjectDetail, ProjectRead, TechRead
from src.hirehub.schemas.user import UserCreate, UserPublic, UserRead

__all__ = [
    # Auth
    "AccountType",
    "LoginRequest",
    "LoginResponse",
    # Company
    "CompanyCreate",
    "CompanyInfoCreate",
    "CompanyInfoRead",
    "CompanyRead",
    # Estimate
    "EstimateCreate",
    "EstimateRead",
    "EstimateSummary",
    # Pagination
    "Page",
    "PageParams",
    # Project
    "ProjectCreate",
    "ProjectDetail",
    "ProjectRead",
    "TechRead",
    # User
    "UserCreate",
    "UserPublic",
    "UserRead",
]
