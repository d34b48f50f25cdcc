from src.hirehub.services.auth_service import AuthService
from src.hirehub.services.company_service import CompanyService
from src.hirehub.services.estimate_service import EstimateService
from src.hirehub.services.patching import PatchApplier, PatchTable, patch_table_for
from src.hirehub.services.project_service import ProjectService
from src.hirehub.services.user_service import UserService

__all__ = [
    "AuthService",
    "CompanyService",
    "EstimateService",
    "PatchApplier",
    "PatchTable",
    "ProjectService",
    "UserService",
    "patch_table_for",
]
