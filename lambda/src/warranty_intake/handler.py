"""Lambda handler invoked directly by the warranty intake widget."""

import json
import logging
from typing import Any

from warranty_intake.catalog import CONFIRMATION_MESSAGE, TROUBLESHOOTING_TIPS, product_choices
from warranty_intake.claim import ClaimForm
from warranty_intake.config import Settings, load_settings
from warranty_intake.eligibility import DateCheck, check_purchase_date
from warranty_intake.submitter import Outcome, submit_claim

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

_settings: Settings | None = None


def _get_settings() -> Settings:
    """Load settings once per container."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def handle_intake(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Dispatch a widget request."""
    try:
        return _handle(event)
    except Exception:
        logger.exception("Failed to handle intake request")
        return _response(500, {"error": "Internal error"})


def _handle(event: dict[str, Any]) -> dict[str, Any]:
    action = event.get("action", "")
    logger.info("Handling intake action %s", action)

    if action == "catalog":
        return _response(200, {"products": product_choices()})
    if action == "troubleshooting":
        return _response(200, {"tips": list(TROUBLESHOOTING_TIPS)})
    if action == "submit_claim":
        return _submit(event.get("claim") or {})

    logger.warning("Unknown intake action: %s", action)
    return _response(400, {"error": f"Unknown action: {action}"})


def _submit(claim: dict[str, Any]) -> dict[str, Any]:
    form = ClaimForm.from_dict(claim)

    # Settings are not needed to reject a date.
    date_check = check_purchase_date(form.purchase_date)
    if date_check is not DateCheck.ELIGIBLE:
        return _not_eligible(date_check)

    result = submit_claim(form, _get_settings())
    if result.outcome is Outcome.NOT_ELIGIBLE:
        return _not_eligible(result.date_check)
    return _response(200, {"outcome": result.outcome.value, "message": CONFIRMATION_MESSAGE})


def _not_eligible(date_check: DateCheck) -> dict[str, Any]:
    return _response(
        422,
        {"outcome": Outcome.NOT_ELIGIBLE.value, "reason": date_check.value, "message": date_check.message},
    )


def _response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {"statusCode": status_code, "body": json.dumps(body)}
