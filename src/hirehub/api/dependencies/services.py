"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.hirehub.api.dependencies.db import DBSession
from src.hirehub.api.dependencies.repositories import (
    CompanyInfoRepo,
    CompanyRepo,
    EstimateRepo,
    ProjectRepo,
    ProjectTechRepo,
    TechRepo,
    UserRepo,
)
from src.hirehub.core.config import get_settings
from src.hirehub.services.auth_service import AuthService
from src.hirehub.services.company_service import CompanyService
from src.hirehub.services.estimate_service import EstimateService
from src.hirehub.services.patching import PatchApplier
from src.hirehub.services.project_service import ProjectService
from src.hirehub.services.user_service import UserService


def get_patch_applier(session: DBSession) -> PatchApplier:
    """Patch applier honoring the configured concurrency mode."""
    return PatchApplier(session, optimistic_locking=get_settings().optimistic_locking)


PatchApplierDep = Annotated[PatchApplier, Depends(get_patch_applier)]


def get_company_service(
    company_repo: CompanyRepo,
    info_repo: CompanyInfoRepo,
    session: DBSession,
    patcher: PatchApplierDep,
) -> CompanyService:
    return CompanyService(company_repo, info_repo, session, patcher)


def get_user_service(
    user_repo: UserRepo, session: DBSession, patcher: PatchApplierDep
) -> UserService:
    return UserService(user_repo, session, patcher)


def get_auth_service(company_repo: CompanyRepo, user_repo: UserRepo) -> AuthService:
    return AuthService(company_repo, user_repo)


def get_project_service(
    project_repo: ProjectRepo,
    tech_repo: TechRepo,
    project_tech_repo: ProjectTechRepo,
    session: DBSession,
    patcher: PatchApplierDep,
) -> ProjectService:
    return ProjectService(project_repo, tech_repo, project_tech_repo, session, patcher)


def get_estimate_service(
    estimate_repo: EstimateRepo, user_repo: UserRepo, session: DBSession
) -> EstimateService:
    return EstimateService(estimate_repo, user_repo, session)


CompanyServiceDep = Annotated[CompanyService, Depends(get_company_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
EstimateServiceDep = Annotated[EstimateService, Depends(get_estimate_service)]
