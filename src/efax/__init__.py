"""
eFax outbound client.

Submits fax jobs to the eFax Developer web service and queries their delivery
status. Keep package import side-effects to a minimum; the public names below
are re-exported for convenience only.
"""

from efax.client import EFaxClient
from efax.config import Credentials, EFaxConfig
from efax.errors import ConfigurationError, EFaxError, ResponseParseError
from efax.models import (
    EmailDisposition,
    FaxJob,
    PostDisposition,
    QueryStatus,
    RequestStatus,
    StatusQueryResult,
    SubmissionResult,
)

__all__ = [
    "ConfigurationError",
    "Credentials",
    "EFaxClient",
    "EFaxConfig",
    "EFaxError",
    "EmailDisposition",
    "FaxJob",
    "PostDisposition",
    "QueryStatus",
    "RequestStatus",
    "ResponseParseError",
    "StatusQueryResult",
    "SubmissionResult",
]
