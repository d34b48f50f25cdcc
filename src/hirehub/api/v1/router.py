from fastapi import APIRouter

from src.hirehub.api.v1 import auth, companies, estimates, projects, users

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(companies.router)
api_router.include_router(users.router)
api_router.include_router(projects.router)
api_router.include_router(estimates.router)
