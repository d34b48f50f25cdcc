"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Auth
from src.hirehub.api.dependencies.auth import (
    CurrentCompany,
    CurrentUser,
    get_current_company,
    get_current_user,
)

# Database
from src.hirehub.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.hirehub.api.dependencies.repositories import (
    CompanyInfoRepo,
    CompanyRepo,
    EstimateRepo,
    ProjectRepo,
    ProjectTechRepo,
    TechRepo,
    UserRepo,
)

# Versioning
from src.hirehub.api.dependencies.versioning import ExpectedVersion, get_expected_version, set_etag

# Services
from src.hirehub.api.dependencies.services import (
    AuthServiceDep,
    CompanyServiceDep,
    EstimateServiceDep,
    PatchApplierDep,
    ProjectServiceDep,
    UserServiceDep,
    get_patch_applier,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentCompany",
    "CurrentUser",
    "get_current_company",
    "get_current_user",
    # Repositories
    "CompanyInfoRepo",
    "CompanyRepo",
    "EstimateRepo",
    "ProjectRepo",
    "ProjectTechRepo",
    "TechRepo",
    "UserRepo",
    # Services
    "AuthServiceDep",
    "CompanyServiceDep",
    "EstimateServiceDep",
    "PatchApplierDep",
    "ProjectServiceDep",
    "UserServiceDep",
    "get_patch_applier",
    # Versioning
    "ExpectedVersion",
    "get_expected_version",
    "set_etag",
]
