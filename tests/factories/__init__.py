"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import CompanyFactory, ProjectFactory, ...
"""

from tests.factories.base import BaseFactory, unique_suffix, utc_now
from tests.factories.company import (
    DEFAULT_TEST_PASSWORD,
    CompanyFactory,
    CompanyInfoFactory,
)
from tests.factories.project import ProjectFactory, TechFactory
from tests.factories.user import EstimateFactory, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "unique_suffix",
    "utc_now",
    # Company
    "CompanyFactory",
    "CompanyInfoFactory",
    "DEFAULT_TEST_PASSWORD",
    # User
    "UserFactory",
    "EstimateFactory",
    # Project
    "ProjectFactory",
    "TechFactory",
]
