"""Webhook payload intake."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..models import InvalidPayloadError, PullRequestEvent
from ..utils import get_logger

logger = get_logger(__name__)


class IntakeStatus(str, Enum):
    ACCEPTED = "accepted"
    IGNORED = "ignored"
    REJECTED = "rejected"


@dataclass(frozen=True)
class IntakeResult:
    """Outcome of parsing a webhook delivery."""

    status: IntakeStatus
    event: PullRequestEvent | None = None
    reason: str = ""

    @property
    def accepted(self) -> bool:
        return self.status == IntakeStatus.ACCEPTED


def parse_webhook_payload(payload: str | bytes | dict[str, Any] | None) -> IntakeResult:
    """Parse a webhook payload into a pull request event.

    Args:
    ----
        payload: Raw JSON text or already decoded payload

    Returns:
    -------
        IntakeResult; ``event`` is set only for accepted deliveries

    """
    if payload is None or payload == "" or payload == b"":
        return IntakeResult(IntakeStatus.REJECTED, reason="Empty payload")

    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            logger.warning("Rejected webhook payload with invalid JSON: %s", e)
            return IntakeResult(IntakeStatus.REJECTED, reason="Invalid JSON payload")

    try:
        event = PullRequestEvent.from_payload(payload)
    except InvalidPayloadError as e:
        logger.warning("Rejected webhook payload: %s", e)
        return IntakeResult(IntakeStatus.REJECTED, reason=str(e))

    # Closed requests are not evaluated
    if event.is_closed:
        logger.info("Ignoring closed pull request #%d", event.pull_number)
        return IntakeResult(IntakeStatus.IGNORED, event=event, reason="Pull request is closed")

    return IntakeResult(IntakeStatus.ACCEPTED, event=event)
