"""Navigation between the widget's screens for one customer session."""

import enum
from datetime import datetime

from warranty_intake.claim import ClaimForm
from warranty_intake.config import Settings
from warranty_intake.submitter import ClaimObserver, Outcome, SubmissionResult, TicketSender, submit_claim
from warranty_intake.ticketing_client import create_ticket


class Screen(enum.Enum):
    HOME = "home"
    TROUBLESHOOT = "troubleshoot"
    WARRANTY = "warranty"
    SUBMITTED = "submitted"


class InvalidTransition(Exception):
    def __init__(self, current: Screen, action: str) -> None:
        super().__init__(f"Cannot {action} from the {current.value} screen")
        self.current = current
        self.action = action


class IntakeSession:
    """One customer's walk through the widget. Owns at most one claim form at a time."""

    def __init__(self) -> None:
        self.screen = Screen.HOME
        self.form: ClaimForm | None = None
        self.error = ""

    def troubleshoot(self) -> None:
        self._require(Screen.HOME, "open troubleshooting")
        self.screen = Screen.TROUBLESHOOT

    def start_claim(self) -> None:
        self._require(Screen.HOME, "start a claim")
        self.screen = Screen.WARRANTY
        if self.form is None:
            self.form = ClaimForm()

    def back(self) -> None:
        if self.screen not in (Screen.TROUBLESHOOT, Screen.WARRANTY):
            raise InvalidTransition(self.screen, "go back")
        self.screen = Screen.HOME
        self.error = ""

    def submit(
        self,
        settings: Settings,
        now: datetime | None = None,
        send: TicketSender = create_ticket,
        observer: ClaimObserver | None = None,
    ) -> SubmissionResult:
        """Submit the current form. An ineligible date keeps the form on screen with an error."""
        self._require(Screen.WARRANTY, "submit a claim")
        if self.form is None:
            raise InvalidTransition(self.screen, "submit an empty claim")
        result = submit_claim(self.form, settings, now=now, send=send, observer=observer)
        if result.outcome is Outcome.NOT_ELIGIBLE:
            self.error = result.message
            return result
        self.error = ""
        self.form = None
        self.screen = Screen.SUBMITTED
        return result

    def start_new_claim(self) -> None:
        self._require(Screen.SUBMITTED, "start a new claim")
        self.form = ClaimForm()
        self.screen = Screen.WARRANTY

    def _require(self, expected: Screen, action: str) -> None:
        if self.screen is not expected:
            raise InvalidTransition(self.screen, action)
