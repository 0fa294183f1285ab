"""
Interpretation of eFax response documents.

Tag lookup is case-insensitive and ignores nesting depth: the service
documents element names (StatusCode, DOCID, Classification, ...) but not a
stable casing or position. A required element that is missing is a schema
violation and raises ResponseParseError rather than defaulting.
"""

from __future__ import annotations

import logging
from xml.etree import ElementTree as ET

from efax.errors import ResponseParseError
from efax.models import QueryStatus, RequestStatus, StatusQueryResult, SubmissionResult
from efax.transport import TransportFailure, TransportOutcome

logger = logging.getLogger(__name__)

CLASSIFICATION_SUCCESS = "Success"
OUTCOME_SUCCESS = "Success"
CLASSIFICATION_BUSY = "Busy"

# HTTP_FAILURE is reserved for transport failures and never comes from a payload.
SERVICE_STATUS_CODES = frozenset({RequestStatus.SUCCESS, RequestStatus.FAILURE})


def http_failure_message(status_code: int) -> str:
    return f"HTTP request failed ({status_code})"


def _parse_document(body: bytes) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raise ResponseParseError(
            f"Response is not well-formed XML: {e}",
            error_code="MALFORMED_XML",
            body=body.decode("utf-8", errors="replace"),
        ) from e


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1].lower()


def _find(root: ET.Element, name: str) -> ET.Element | None:
    wanted = name.lower()
    for element in root.iter():
        if isinstance(element.tag, str) and _local_name(element.tag) == wanted:
            return element
    return None


def _text(element: ET.Element) -> str:
    return "".join(element.itertext()).strip()


def _optional_text(root: ET.Element, name: str) -> str | None:
    element = _find(root, name)
    return None if element is None else _text(element)


def _required_text(root: ET.Element, name: str) -> str:
    element = _find(root, name)
    if element is None:
        raise ResponseParseError(
            f"Response is missing required element <{name}>",
            error_code="MISSING_ELEMENT",
            body=ET.tostring(root, encoding="unicode"),
        )
    return _text(element)


def parse_submission_response(outcome: TransportOutcome) -> SubmissionResult:
    """Interpret the acknowledgement of a fax submission."""
    if isinstance(outcome, TransportFailure):
        return SubmissionResult(
            status_code=RequestStatus.HTTP_FAILURE,
            error_message=http_failure_message(outcome.status_code),
        )

    root = _parse_document(outcome.body)

    raw_status = _required_text(root, "statuscode")
    try:
        status_code = RequestStatus(int(raw_status))
    except ValueError:
        status_code = None
    if status_code not in SERVICE_STATUS_CODES:
        raise ResponseParseError(
            f"Unexpected status code {raw_status!r}",
            error_code="INVALID_STATUS_CODE",
            body=outcome.body.decode("utf-8", errors="replace"),
        )

    doc_id = _required_text(root, "docid")

    result = SubmissionResult(
        status_code=status_code,
        error_message=_optional_text(root, "errormessage"),
        error_level=_optional_text(root, "errorlevel"),
        doc_id=doc_id or None,
    )
    if status_code != RequestStatus.SUCCESS:
        logger.warning(
            "eFax rejected submission",
            extra={
                "error_message": result.error_message,
                "error_level": result.error_level,
            },
        )
    return result


def classify_status(classification: str, outcome: str) -> QueryStatus:
    """Fold the service's classification/outcome pair into a QueryStatus.

    No classification and no outcome yet, or a busy line, both count as
    pending. Only Success/Success is sent; every other pair is a failure.
    """
    not_sent_yet = not classification and not outcome
    if not_sent_yet or classification == CLASSIFICATION_BUSY:
        return QueryStatus.PENDING
    if classification == CLASSIFICATION_SUCCESS and outcome == OUTCOME_SUCCESS:
        return QueryStatus.SENT
    return QueryStatus.FAILURE


def parse_status_response(outcome: TransportOutcome) -> StatusQueryResult:
    """Interpret the response to a delivery status query."""
    if isinstance(outcome, TransportFailure):
        return StatusQueryResult(
            status_code=QueryStatus.HTTP_FAILURE,
            message=http_failure_message(outcome.status_code),
        )

    root = _parse_document(outcome.body)

    message = _required_text(root, "message").strip('"')
    classification = _required_text(root, "classification").replace('"', "")
    result_outcome = _required_text(root, "outcome").replace('"', "")

    return StatusQueryResult(
        status_code=classify_status(classification, result_outcome),
        message=message,
        classification=classification,
        outcome=result_outcome,
    )
