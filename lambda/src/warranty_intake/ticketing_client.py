"""Create support tickets through the ticketing REST API."""

import logging
from typing import Any

import requests

from warranty_intake.claim import TicketPayload
from warranty_intake.config import Settings

logger = logging.getLogger(__name__)


def build_request_body(payload: TicketPayload) -> dict[str, Any]:
    """Wrap a ticket payload in the ticketing API's request envelope."""
    return {
        "ticket": {
            "subject": payload.subject,
            "comment": {"body": payload.body},
            "priority": payload.priority,
            "tags": list(payload.tags),
        }
    }


def create_ticket(settings: Settings, payload: TicketPayload) -> requests.Response:
    """POST one ticket. Raises ``requests.RequestException`` on transport errors or non-2xx status."""
    logger.info("Creating ticket: subject=%s, priority=%s", payload.subject, payload.priority)

    response = requests.post(
        settings.tickets_url,
        json=build_request_body(payload),
        auth=settings.auth,
        headers={"Content-Type": "application/json"},
        timeout=settings.timeout_seconds,
        allow_redirects=False,
    )
    response.raise_for_status()
    if not 200 <= response.status_code < 300:
        raise requests.HTTPError(f"Unexpected status {response.status_code} from ticketing API", response=response)

    logger.info("Ticketing API returned: status=%d", response.status_code)
    return response
