"""Tests for config module."""

import os
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from warranty_intake import config
from warranty_intake.config import DEFAULT_TIMEOUT_SECONDS, Settings, load_settings

ENV_VARS = {
    "TICKETING_BASE_URL": "hypertough",
    "TICKETING_ACCOUNT_EMAIL": "support@example.com",
    "SSM_TICKETING_TOKEN_PARAM": "/test/ticketing-token",
    "TICKETING_TIMEOUT_SECONDS": "3.5",
    "SNS_TOPIC_ARN": "arn:aws:sns:us-east-1:123456789012:alerts",
}


@pytest.fixture(autouse=True)
def _clear_ssm_cache() -> None:
    config._ssm_cache.clear()


@patch.dict(os.environ, ENV_VARS)
@patch("warranty_intake.config.SSM_CLIENT")
def test_load_settings_reads_env_and_ssm(mock_ssm: MagicMock) -> None:
    mock_ssm.get_parameter.return_value = {"Parameter": {"Value": "secret-token"}}

    settings = load_settings()

    assert settings == Settings(
        ticketing_base_url="hypertough",
        account_email="support@example.com",
        api_token="secret-token",
        timeout_seconds=3.5,
        alert_topic_arn="arn:aws:sns:us-east-1:123456789012:alerts",
    )
    mock_ssm.get_parameter.assert_called_once_with(Name="/test/ticketing-token", WithDecryption=True)


@patch.dict(os.environ, ENV_VARS)
@patch("warranty_intake.config.SSM_CLIENT")
def test_ssm_token_is_cached(mock_ssm: MagicMock) -> None:
    mock_ssm.get_parameter.return_value = {"Parameter": {"Value": "secret-token"}}

    load_settings()
    load_settings()

    mock_ssm.get_parameter.assert_called_once()


@patch.dict(os.environ, {}, clear=True)
@patch("warranty_intake.config.SSM_CLIENT")
def test_missing_values_are_left_empty(mock_ssm: MagicMock) -> None:
    settings = load_settings()

    assert settings.ticketing_base_url == ""
    assert settings.account_email == ""
    assert settings.api_token == ""
    assert settings.alert_topic_arn == ""
    assert settings.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    mock_ssm.get_parameter.assert_not_called()


def test_tickets_url_from_subdomain() -> None:
    settings = Settings(ticketing_base_url="hypertough", account_email="a@b.c", api_token="t")
    assert settings.tickets_url == "https://hypertough.zendesk.com/api/v2/tickets.json"


def test_tickets_url_from_base_url() -> None:
    settings = Settings(ticketing_base_url="https://support.example.com/", account_email="a@b.c", api_token="t")
    assert settings.tickets_url == "https://support.example.com/api/v2/tickets.json"


def test_auth_uses_token_convention() -> None:
    settings = Settings(ticketing_base_url="x", account_email="agent@example.com", api_token="abc")
    assert settings.auth == ("agent@example.com/token", "abc")


@patch.dict(os.environ, ENV_VARS)
@patch("warranty_intake.config.SSM_CLIENT")
def test_unreadable_token_is_left_empty(mock_ssm: MagicMock) -> None:
    mock_ssm.get_parameter.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": ""}},
        "GetParameter",
    )

    settings = load_settings()

    assert settings.api_token == ""
    assert settings.account_email == "support@example.com"
    assert "/test/ticketing-token" not in config._ssm_cache


@pytest.mark.parametrize("value", ["10s", "0", "-5"])
@patch("warranty_intake.config.SSM_CLIENT")
def test_invalid_timeout_uses_default(mock_ssm: MagicMock, value: str) -> None:
    with patch.dict(os.environ, {**ENV_VARS, "TICKETING_TIMEOUT_SECONDS": value}):
        settings = load_settings()

    assert settings.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
