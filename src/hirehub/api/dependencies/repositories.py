"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.hirehub.api.dependencies.db import DBSession
from src.hirehub.repositories import (
    CompanyInfoRepository,
    CompanyRepository,
    EstimateRepository,
    ProjectRepository,
    ProjectTechRepository,
    TechRepository,
    UserRepository,
)


def get_company_repository(session: DBSession) -> CompanyRepository:
    return CompanyRepository(session)


def get_company_info_repository(session: DBSession) -> CompanyInfoRepository:
    return CompanyInfoRepository(session)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_tech_repository(session: DBSession) -> TechRepository:
    return TechRepository(session)


def get_project_tech_repository(session: DBSession) -> ProjectTechRepository:
    return ProjectTechRepository(session)


def get_estimate_repository(session: DBSession) -> EstimateRepository:
    return EstimateRepository(session)


CompanyRepo = Annotated[CompanyRepository, Depends(get_company_repository)]
CompanyInfoRepo = Annotated[CompanyInfoRepository, Depends(get_company_info_repository)]
UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
TechRepo = Annotated[TechRepository, Depends(get_tech_repository)]
ProjectTechRepo = Annotated[ProjectTechRepository, Depends(get_project_tech_repository)]
EstimateRepo = Annotated[EstimateRepository, Depends(get_estimate_repository)]
