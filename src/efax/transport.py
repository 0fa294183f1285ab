"""
HTTPS transport for the eFax outbound endpoint.

The transport only moves bytes: it never interprets the response document.
Any non-200 status or connection error is folded into TransportFailure so
callers receive a value instead of an exception.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Union
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)

# Status code reported when no HTTP response was received at all.
NO_RESPONSE_STATUS = 0


@dataclass(frozen=True)
class TransportOk:
    """HTTP 200 response body."""

    body: bytes
    status_code: int = 200


@dataclass(frozen=True)
class TransportFailure:
    """Non-200 response or connection error."""

    status_code: int
    reason: str = ""


TransportOutcome = Union[TransportOk, TransportFailure]


class Transport(ABC):
    """Abstract HTTPS POST transport."""

    @abstractmethod
    def post(self, url: str, body: bytes, content_type: str) -> TransportOutcome:
        """POST ``body`` to ``url`` and return the outcome."""
        ...

    def close(self) -> None:
        """Release any held resources."""


class HttpxTransport(Transport):
    """Transport backed by httpx.

    The client may be injected (tests, connection sharing); a client created
    here is owned and closed by ``close()``.
    """

    def __init__(
        self,
        timeout_seconds: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client
        self._owns_client = http_client is None
        # Guards lazy creation; calls may arrive from several worker threads.
        self._client_lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        client = self._http_client
        if client is not None:
            return client
        with self._client_lock:
            if self._http_client is None:
                self._http_client = httpx.Client(timeout=httpx.Timeout(self._timeout_seconds))
            return self._http_client

    def close(self) -> None:
        if not self._owns_client:
            return
        with self._client_lock:
            if self._http_client is not None:
                self._http_client.close()
                self._http_client = None

    def post(self, url: str, body: bytes, content_type: str) -> TransportOutcome:
        if urlparse(url).scheme != "https":
            raise ValueError(f"eFax requests must use TLS, got {url!r}")

        client = self._get_client()
        try:
            response = client.post(
                url,
                content=body,
                headers={"Content-Type": content_type},
            )
        except httpx.HTTPError as e:
            logger.exception(
                "HTTP error during eFax request",
                extra={"url": url, "content_type": content_type},
            )
            return TransportFailure(status_code=NO_RESPONSE_STATUS, reason=str(e))

        if response.status_code != 200:
            logger.error(
                "eFax request failed",
                extra={"url": url, "status_code": response.status_code},
            )
            return TransportFailure(
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        return TransportOk(body=response.content)


@dataclass(frozen=True)
class RecordedRequest:
    url: str
    body: bytes
    content_type: str


MOCK_SUBMISSION_RESPONSE = b"""<?xml version="1.0"?>
<OutboundResponse>
  <Transmission>
    <TransmissionControl>
      <TransmissionID></TransmissionID>
      <DOCID>MOCK_DOC_000001</DOCID>
    </TransmissionControl>
    <Response>
      <StatusCode>1</StatusCode>
    </Response>
  </Transmission>
</OutboundResponse>
"""

MOCK_STATUS_RESPONSE = b"""<?xml version="1.0"?>
<OutboundStatusResponse>
  <Transmission>
    <TransmissionControl>
      <DOCID>MOCK_DOC_000001</DOCID>
    </TransmissionControl>
    <Recipients>
      <Recipient>
        <Status>
          <Message>Your fax has been sent.</Message>
          <Classification>"Success"</Classification>
          <Outcome>"Success"</Outcome>
        </Status>
      </Recipient>
    </Recipients>
  </Transmission>
</OutboundStatusResponse>
"""


@dataclass
class MockTransport(Transport):
    """In-process transport for development and manual testing.

    Never touches the network. Queued outcomes are replayed first; once the
    queue is empty a canned acknowledgement matching the request kind is
    returned.
    """

    outcomes: deque[TransportOutcome] = field(default_factory=deque)
    requests: list[RecordedRequest] = field(default_factory=list)

    def enqueue(self, outcome: TransportOutcome) -> None:
        self.outcomes.append(outcome)

    def post(self, url: str, body: bytes, content_type: str) -> TransportOutcome:
        self.requests.append(RecordedRequest(url=url, body=body, content_type=content_type))
        if self.outcomes:
            return self.outcomes.popleft()
        if b"OutboundStatus" in body:
            return TransportOk(body=MOCK_STATUS_RESPONSE)
        return TransportOk(body=MOCK_SUBMISSION_RESPONSE)
