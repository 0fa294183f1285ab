"""
Domain models for outbound fax submission and status queries.

Values mirror the eFax Developer outbound API: request documents are built
from FaxJob, responses are interpreted into SubmissionResult and
StatusQueryResult.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union


class DispositionLevel(str, Enum):
    """Which outcomes trigger a disposition notification."""

    ERROR = "ERROR"
    SUCCESS = "SUCCESS"
    BOTH = "BOTH"
    NONE = "NONE"


class DispositionMethod(str, Enum):
    """How the service delivers the disposition notification."""

    POST = "POST"
    EMAIL = "EMAIL"


# Transmission control values sent with every submission.
RESOLUTION = "STANDARD"
PRIORITY = "NORMAL"
SELF_BUSY = "ENABLE"

DEFAULT_CONTENT_TYPE = "html"


class RequestStatus(IntEnum):
    """Outcome of a fax submission."""

    HTTP_FAILURE = 0
    SUCCESS = 1
    FAILURE = 2


class QueryStatus(IntEnum):
    """Delivery status reported by a status query."""

    HTTP_FAILURE = 0
    PENDING = 3
    SENT = 4
    FAILURE = 5


@dataclass(frozen=True)
class PostDisposition:
    """Disposition delivered as an HTTP POST to a callback URL."""

    url: str

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("PostDisposition requires a callback url")

    @property
    def method(self) -> DispositionMethod:
        return DispositionMethod.POST

    @property
    def level(self) -> DispositionLevel:
        return DispositionLevel.BOTH


@dataclass(frozen=True)
class EmailDisposition:
    """Disposition delivered by email to a recipient name and/or address."""

    recipient: str | None = None
    address: str | None = None

    def __post_init__(self) -> None:
        if not self.recipient and not self.address:
            raise ValueError("EmailDisposition requires a recipient or an address")

    @property
    def method(self) -> DispositionMethod:
        return DispositionMethod.EMAIL

    @property
    def level(self) -> DispositionLevel:
        return DispositionLevel.BOTH


Disposition = Union[PostDisposition, EmailDisposition]


@dataclass(frozen=True)
class FaxJob:
    """A single outbound fax to submit."""

    name: str
    company: str
    fax_number: str
    subject: str
    content: bytes | str
    content_type: str = DEFAULT_CONTENT_TYPE
    transmission_id: str | None = None
    disposition: Disposition | None = None

    @property
    def content_bytes(self) -> bytes:
        if isinstance(self.content, str):
            return self.content.encode("utf-8")
        return self.content


@dataclass(frozen=True)
class SubmissionResult:
    """Acknowledgement of a fax submission."""

    status_code: RequestStatus
    error_message: str | None = None
    error_level: str | None = None
    doc_id: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status_code == RequestStatus.SUCCESS


@dataclass(frozen=True)
class StatusQueryResult:
    """Delivery status of a previously submitted fax."""

    status_code: QueryStatus
    message: str = ""
    classification: str = ""
    outcome: str = ""

    @property
    def is_pending(self) -> bool:
        return self.status_code == QueryStatus.PENDING

    @property
    def is_final(self) -> bool:
        """True once the service has reached a definitive delivery outcome."""
        return self.status_code in (QueryStatus.SENT, QueryStatus.FAILURE)
