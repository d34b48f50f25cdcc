"""Project and tech factories for test data generation."""

from polyfactory import Use

from src.hirehub.models import Project, Tech
from tests.factories.base import BaseFactory, unique_suffix, utc_now


class ProjectFactory(BaseFactory):
    """Factory for generating Project test data."""

    __model__ = Project

    # FK field - must be set explicitly
    company_id = None
    name = Use(lambda: f"Project {unique_suffix()}")
    description = None
    version = 1
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class TechFactory(BaseFactory):
    __model__ = Tech

    name = Use(lambda: f"tech-{unique_suffix()}")
