"""Shared test fixtures for warranty intake tests."""

import os
from datetime import UTC, datetime

import pytest

# Set dummy AWS credentials so module-level boto3.client() calls don't fail during import.
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

from warranty_intake.claim import ClaimForm
from warranty_intake.config import Settings

NOW = datetime(2026, 10, 19, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """A fixed clock at midnight UTC so whole-day offsets land exactly on boundaries."""
    return NOW


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ticketing_base_url="hypertough",
        account_email="support@example.com",
        api_token="test-token",
        timeout_seconds=5.0,
        alert_topic_arn="arn:aws:sns:us-east-1:123456789012:test-topic",
    )


@pytest.fixture
def claim_form() -> ClaimForm:
    """A filled-in claim with an eligible purchase date relative to ``NOW``."""
    return ClaimForm(
        name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        sku="HT-CREEPER",
        purchase_date="2026-03-01",
        description="Caster snapped off",
        injury=False,
    )
