"""Pytest configuration and fixtures."""

import pytest

from src.config.settings import Settings
from src.services.verification.models import Evidence


@pytest.fixture
def settings():
    """Provide settings with a provider credential."""
    return Settings(_env_file=None, openai_api_key="test-key")


@pytest.fixture
def unconfigured_settings():
    """Provide settings without a provider credential."""
    return Settings(_env_file=None, openai_api_key=None)


@pytest.fixture
def coach_evidence():
    """Applicant who looks like a running coach."""
    return Evidence(
        user_type="Coach / Trainer",
        full_name="John Doe",
        email="john@example.com",
        about="Certified personal trainer",
        specialization="Running",
        years_of_experience="",
        certifications="NASM CPT",
        location="Paris, France",
        documents=("https://cdn.example.com/cert.pdf", "https://cdn.example.com/id.jpg"),
    )


@pytest.fixture
def member_evidence():
    """Applicant with nothing pointing to a coaching profile."""
    return Evidence(
        user_type="Member",
        full_name="Lea Martin",
        email="lea@example.com",
        about="I love running marathons",
        specialization="",
        years_of_experience="",
        certifications="",
        location="Nice, France",
    )
