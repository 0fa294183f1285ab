"""
eFax outbound client.

Composes the request pipeline for both operations:
XML document -> form payload -> transport POST -> response interpretation.
The client holds no mutable state beyond its transport, so one instance can
serve concurrent callers.
"""

from __future__ import annotations

from types import TracebackType
from uuid import uuid4

import anyio

from efax.config import Credentials, EFaxConfig
from efax.models import FaxJob, StatusQueryResult, SubmissionResult
from efax.params import STATUS_CONTENT_TYPE, content_type_for_submission, encode_params
from efax.responses import parse_status_response, parse_submission_response
from efax.shared.logging import get_logger, mask, request_id_var
from efax.transport import HttpxTransport, Transport
from efax.xml_builder import build_outbound_request, build_outbound_status

logger = get_logger(__name__)


class EFaxClient:
    """Client for the eFax Developer outbound API.

    Uses HttpxTransport unless a transport is injected. The async entrypoints
    delegate to the sync implementation in a worker thread.
    """

    def __init__(
        self,
        config: EFaxConfig,
        transport: Transport | None = None,
        *,
        owns_transport: bool | None = None,
    ) -> None:
        self._config = config
        self._credentials: Credentials = config.credentials()
        if owns_transport is None:
            owns_transport = transport is None
        if transport is None:
            transport = HttpxTransport(timeout_seconds=config.timeout_seconds)
        self._transport = transport
        self._owns_transport = owns_transport

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> EFaxClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def submit_fax(self, job: FaxJob) -> SubmissionResult:
        """Submit ``job`` for delivery.

        Transport failures are reported as RequestStatus.HTTP_FAILURE; the
        call is never retried here.
        """
        token = request_id_var.set(uuid4().hex)
        try:
            xml = build_outbound_request(self._credentials, job)
            body = encode_params(self._credentials.account_id, xml)
            content_type = content_type_for_submission(job)

            logger.info(
                "Submitting fax",
                extra={
                    "fax_number": mask(job.fax_number),
                    "transmission_id": job.transmission_id,
                    "content_type": content_type,
                    "content_bytes": len(job.content_bytes),
                },
            )

            outcome = self._transport.post(self._config.service_url, body, content_type)
            result = parse_submission_response(outcome)

            logger.info(
                "Fax submission finished",
                extra={"status_code": result.status_code.name, "doc_id": result.doc_id},
            )
            return result
        finally:
            request_id_var.reset(token)

    def query_status(self, doc_id: str) -> StatusQueryResult:
        """Query the delivery status of a submission by its document id."""
        token = request_id_var.set(uuid4().hex)
        try:
            xml = build_outbound_status(self._credentials, doc_id)
            body = encode_params(self._credentials.account_id, xml)

            logger.info("Querying fax status", extra={"doc_id": doc_id})

            outcome = self._transport.post(self._config.service_url, body, STATUS_CONTENT_TYPE)
            result = parse_status_response(outcome)

            logger.info(
                "Fax status query finished",
                extra={
                    "doc_id": doc_id,
                    "status_code": result.status_code.name,
                    "classification": result.classification,
                    "outcome": result.outcome,
                },
            )
            return result
        finally:
            request_id_var.reset(token)

    async def submit_fax_async(self, job: FaxJob) -> SubmissionResult:
        """Async wrapper around submit_fax."""
        return await anyio.to_thread.run_sync(self.submit_fax, job)

    async def query_status_async(self, doc_id: str) -> StatusQueryResult:
        """Async wrapper around query_status."""
        return await anyio.to_thread.run_sync(self.query_status, doc_id)
