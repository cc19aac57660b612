from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from linkview.services.transport.client import RequestOutcome, Transport

logger = logging.getLogger(__name__)


class InvalidOperation(ValueError):
    pass


class Operation(str, Enum):
    RETRIEVE_EMAILS = "RetrieveEmails"
    RETRIEVE_URLS = "RetrieveURLs"
    RETRIEVE_INFO = "RetrieveInfo"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def default(cls) -> "Operation":
        return next(iter(cls))

    @classmethod
    def parse(cls, choice) -> "Operation":
        if isinstance(choice, cls):
            return choice
        if isinstance(choice, str):
            wanted = choice.strip().lower()
            for op in cls:
                if wanted in (op.value.lower(), op.name.lower(), op.label.lower()):
                    return op
        raise InvalidOperation(f"Unknown operation: {choice!r}")


_LABELS = {
    Operation.RETRIEVE_EMAILS: "Retrieve Emails",
    Operation.RETRIEVE_URLS: "Retrieve URLs",
    Operation.RETRIEVE_INFO: "Retrieve Information",
}


class Phase(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"


@dataclass
class FormState:
    operation: Operation = Operation.default()
    target_url: str = ""


class FormController:
    """Pending input for one submission.

    Only ``Operation.RETRIEVE_URLS`` reaches the crawl service; the other
    operations are accepted by the form and submit as a no-op.
    """

    def __init__(self, transport: Transport):
        self.transport = transport
        self.state = FormState()
        self.phase = Phase.EDITING

    @property
    def is_submitting(self) -> bool:
        return self.phase is Phase.SUBMITTING

    def set_target_url(self, text: str) -> None:
        if self.is_submitting:
            logger.debug("Ignoring website change while submitting")
            return
        self.state.target_url = text

    def set_operation(self, choice) -> Operation:
        op = Operation.parse(choice)
        if self.is_submitting:
            logger.debug("Ignoring operation change while submitting")
            return self.state.operation
        self.state.operation = op
        return op

    async def submit(self) -> Optional[RequestOutcome]:
        if self.state.operation is not Operation.RETRIEVE_URLS:
            logger.debug("%s is not wired to the service", self.state.operation.label)
            return None
        if self.is_submitting:
            logger.debug("Submit ignored, a request is already in flight")
            return None
        self.phase = Phase.SUBMITTING
        try:
            return await self.transport.send(
                self.state.operation.value, self.state.target_url
            )
        finally:
            self.phase = Phase.EDITING
