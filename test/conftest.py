"""
Pytest configuration and fixtures for the eFax client tests.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import logging
from collections.abc import Iterator

import httpx
import pytest

from efax.config import Credentials, EFaxConfig, TransportType
from efax.models import FaxJob

SUBMISSION_OK_BODY = b"""<?xml version="1.0"?>
<OutboundResponse>
  <Transmission>
    <TransmissionControl>
      <TransmissionID>tx-42</TransmissionID>
      <DOCID>12345678</DOCID>
    </TransmissionControl>
    <Response>
      <StatusCode>1</StatusCode>
      <StatusDescription>Success</StatusDescription>
    </Response>
  </Transmission>
</OutboundResponse>
"""

SUBMISSION_ERROR_BODY = b"""<?xml version="1.0"?>
<OutboundResponse>
  <Transmission>
    <TransmissionControl>
      <TransmissionID></TransmissionID>
      <DOCID></DOCID>
    </TransmissionControl>
    <Response>
      <StatusCode>2</StatusCode>
      <ErrorMessage>Invalid fax number</ErrorMessage>
      <ErrorLevel>User</ErrorLevel>
    </Response>
  </Transmission>
</OutboundResponse>
"""


def status_body(classification: str, outcome: str, message: str = "Fax status") -> bytes:
    return f"""<?xml version="1.0"?>
<OutboundStatusResponse>
  <Transmission>
    <TransmissionControl>
      <DOCID>12345678</DOCID>
    </TransmissionControl>
    <Recipients>
      <Recipient>
        <Status>
          <Message>{message}</Message>
          <Classification>{classification}</Classification>
          <Outcome>{outcome}</Outcome>
        </Status>
      </Recipient>
    </Recipients>
  </Transmission>
</OutboundStatusResponse>
""".encode("utf-8")


@pytest.fixture
def efax_config() -> EFaxConfig:
    return EFaxConfig(
        username="test_user",
        password="test_password",
        account_id="1234567890",
        service_url="https://secure.efaxdeveloper.com/EFax_WebFax.serv",
        timeout_seconds=10.0,
        transport_type=TransportType.HTTPX,
    )


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="test_user", password="test_password", account_id="1234567890")


@pytest.fixture
def fax_job() -> FaxJob:
    return FaxJob(
        name="Jane Doe",
        company="Acme Corp",
        fax_number="12125551234",
        subject="Quarterly report",
        content=b"<html><body><h1>Hello</h1></body></html>",
    )


@pytest.fixture
def mock_http_client() -> MagicMock:
    return MagicMock(spec=httpx.Client)


@pytest.fixture
def submission_ok_body() -> bytes:
    return SUBMISSION_OK_BODY


@pytest.fixture
def submission_error_body() -> bytes:
    return SUBMISSION_ERROR_BODY


@pytest.fixture
def make_status_body():
    return status_body


@pytest.fixture(autouse=True)
def reset_efax_logger() -> Iterator[None]:
    """Undo setup_logging() so caplog keeps receiving efax records."""
    yield
    efax_logger = logging.getLogger("efax")
    efax_logger.handlers = []
    efax_logger.propagate = True
    efax_logger.setLevel(logging.NOTSET)
