"""Publish operator notifications about warranty claims to SNS."""

import logging

import boto3

from warranty_intake.claim import TicketPayload

logger = logging.getLogger(__name__)

SNS_CLIENT = boto3.client("sns")


class SnsObserver:
    """Tell operators about claims that need a human, via an SNS topic.

    With no topic configured, notifications are only logged.
    """

    def __init__(self, topic_arn: str) -> None:
        self.topic_arn = topic_arn

    def transport_failed(self, payload: TicketPayload, error: Exception) -> None:
        body = (
            "A warranty claim could not be delivered to the ticketing system.\n"
            "The customer was shown a successful submission, so this ticket must be "
            "created by hand.\n\n"
            f"Error: {error}\n\n"
            f"Subject: {payload.subject}\n"
            f"Priority: {payload.priority}\n\n"
            f"{payload.body}"
        )
        self._publish("Warranty Claim Delivery Failed", body)

    def injury_reported(self, payload: TicketPayload) -> None:
        body = (
            "A warranty claim was submitted with a personal injury flagged.\n"
            "A representative must contact the customer directly.\n\n"
            f"{payload.body}"
        )
        self._publish(f"Personal Injury Reported: {payload.subject}", body)

    def _publish(self, subject: str, message: str) -> None:
        if not self.topic_arn:
            logger.warning("No alert topic configured, dropping notification: %s", subject)
            return
        # SNS subjects are limited to 100 characters
        SNS_CLIENT.publish(TopicArn=self.topic_arn, Subject=subject[:100], Message=message)
