"""Company and company-info factories for test data generation."""

from polyfactory import Use

from src.hirehub.core.security import hash_password
from src.hirehub.models import Company, CompanyInfo
from tests.factories.base import BaseFactory, unique_suffix, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "correct-horse-battery-staple"


class CompanyFactory(BaseFactory):
    """Factory for generating Company test data."""

    __model__ = Company

    username = Use(lambda: f"company_{unique_suffix()}")
    email = Use(lambda: f"hr_{unique_suffix()}@example.com")
    name = Use(lambda: f"Company {unique_suffix()}")
    phone = None
    hashed_password = Use(lambda: hash_password(DEFAULT_TEST_PASSWORD))
    version = 1
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class CompanyInfoFactory(BaseFactory):
    """Factory for generating CompanyInfo test data."""

    __model__ = CompanyInfo

    # FK field - must be set explicitly
    company_id = None
    ceo = "Alice"
    address = "12 Teheran-ro, Seoul"
    company_call = "02-555-0100"
    registration_number = "220-81-62517"
    registration_file = None
    version = 1
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
