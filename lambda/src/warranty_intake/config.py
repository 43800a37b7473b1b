"""Process-wide settings for the ticketing integration."""

import logging
import os
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)

SSM_CLIENT = boto3.client("ssm")

DEFAULT_TIMEOUT_SECONDS = 10.0

_ssm_cache: dict[str, str] = {}


@dataclass(frozen=True)
class Settings:
    ticketing_base_url: str
    account_email: str
    api_token: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    alert_topic_arn: str = ""

    @property
    def tickets_url(self) -> str:
        base = self.ticketing_base_url.strip().rstrip("/")
        if base and not base.startswith(("http://", "https://")):
            base = f"https://{base}.zendesk.com"
        return f"{base}/api/v2/tickets.json"

    @property
    def auth(self) -> tuple[str, str]:
        return (f"{self.account_email}/token", self.api_token)


def load_settings() -> Settings:
    """Read settings from the environment, pulling the API token from SSM.

    Missing or unreadable values are left empty (or at their default) and
    logged; requests built from them will simply be rejected by the
    ticketing system.
    """
    token_param = os.environ.get("SSM_TICKETING_TOKEN_PARAM", "")
    return Settings(
        ticketing_base_url=os.environ.get("TICKETING_BASE_URL", ""),
        account_email=os.environ.get("TICKETING_ACCOUNT_EMAIL", ""),
        api_token=_get_api_token(token_param) if token_param else "",
        timeout_seconds=_get_timeout(os.environ.get("TICKETING_TIMEOUT_SECONDS", "")),
        alert_topic_arn=os.environ.get("SNS_TOPIC_ARN", ""),
    )


def _get_api_token(param_name: str) -> str:
    try:
        return _get_ssm_param(param_name)
    except (BotoCoreError, ClientError):
        logger.exception("Failed to read ticketing API token from %s", param_name)
        return ""


def _get_timeout(value: str) -> float:
    if not value:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(value)
    except ValueError:
        timeout = 0.0
    if timeout > 0:
        return timeout
    logger.warning("Invalid TICKETING_TIMEOUT_SECONDS %r, using %s", value, DEFAULT_TIMEOUT_SECONDS)
    return DEFAULT_TIMEOUT_SECONDS


def _get_ssm_param(name: str) -> str:
    """Fetch an SSM parameter, caching across invocations."""
    if name not in _ssm_cache:
        response = SSM_CLIENT.get_parameter(Name=name, WithDecryption=True)
        _ssm_cache[name] = response["Parameter"]["Value"]
    return _ssm_cache[name]
