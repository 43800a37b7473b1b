"""Validate a warranty claim and hand it to the ticketing system."""

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from warranty_intake.claim import ClaimForm, TicketPayload, build_ticket
from warranty_intake.config import Settings
from warranty_intake.eligibility import DateCheck, check_purchase_date
from warranty_intake.notifier import SnsObserver
from warranty_intake.ticketing_client import create_ticket

logger = logging.getLogger(__name__)

TicketSender = Callable[[Settings, TicketPayload], object]


class ClaimObserver(Protocol):
    def transport_failed(self, payload: TicketPayload, error: Exception) -> None: ...

    def injury_reported(self, payload: TicketPayload) -> None: ...


class Outcome(enum.Enum):
    SUBMITTED = "submitted"
    NOT_ELIGIBLE = "not_eligible"


@dataclass(frozen=True)
class SubmissionResult:
    outcome: Outcome
    date_check: DateCheck
    ticket: TicketPayload | None = None
    # Observability only. Callers must not gate what the user sees on this.
    delivered: bool = False

    @property
    def message(self) -> str:
        return self.date_check.message


def submit_claim(
    form: ClaimForm,
    settings: Settings,
    now: datetime | None = None,
    send: TicketSender = create_ticket,
    observer: ClaimObserver | None = None,
) -> SubmissionResult:
    """Submit a claim, reporting SUBMITTED once delivery has been attempted.

    An ineligible purchase date is the only failure the caller sees, and it
    is detected before any network activity.
    """
    date_check = check_purchase_date(form.purchase_date, now=now)
    if date_check is not DateCheck.ELIGIBLE:
        logger.info("Rejected claim for %s: purchase date %s", form.sku, date_check.value)
        return SubmissionResult(outcome=Outcome.NOT_ELIGIBLE, date_check=date_check)

    if observer is None:
        observer = SnsObserver(settings.alert_topic_arn)

    ticket = build_ticket(form)
    delivered = send_ticket_ignoring_failure(settings, ticket, send, observer)

    if form.injury:
        _report_injury(ticket, observer)

    logger.info("Submitted claim for %s: delivered=%s", form.sku, delivered)
    return SubmissionResult(outcome=Outcome.SUBMITTED, date_check=date_check, ticket=ticket, delivered=delivered)


def send_ticket_ignoring_failure(
    settings: Settings, ticket: TicketPayload, send: TicketSender, observer: ClaimObserver
) -> bool:
    """Attempt delivery exactly once. Transport failures are logged and reported, never raised.

    Returns True only when the ticketing system accepted the ticket.
    """
    try:
        send(settings, ticket)
    except Exception as e:
        logger.exception("Ticket delivery failed for %s", ticket.subject)
        try:
            observer.transport_failed(ticket, e)
        except Exception:
            logger.exception("Failed to report delivery failure for %s", ticket.subject)
        return False
    return True


def _report_injury(ticket: TicketPayload, observer: ClaimObserver) -> None:
    try:
        observer.injury_reported(ticket)
    except Exception:
        logger.exception("Failed to report personal injury for %s", ticket.subject)
