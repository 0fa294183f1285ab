"""
Tests for the eFax client factory.
"""

import logging
from collections.abc import Iterator

import pytest

from efax.client import EFaxClient
from efax.config import EFaxConfig, TransportType
from efax.factory import (
    build_transport,
    create_efax_client,
    get_efax_client,
    get_efax_config,
)
from efax.models import FaxJob
from efax.transport import HttpxTransport, MockTransport


@pytest.fixture(autouse=True)
def clear_factory_caches() -> Iterator[None]:
    get_efax_config.cache_clear()
    get_efax_client.cache_clear()
    yield
    get_efax_config.cache_clear()
    get_efax_client.cache_clear()


class TestBuildTransport:
    def test_httpx(self, efax_config: EFaxConfig) -> None:
        assert isinstance(build_transport(efax_config), HttpxTransport)

    def test_mock(self) -> None:
        config = EFaxConfig(transport_type=TransportType.MOCK)
        assert isinstance(build_transport(config), MockTransport)


class TestCreateClient:
    def test_create_client(self, efax_config: EFaxConfig) -> None:
        client = create_efax_client(efax_config)

        assert isinstance(client, EFaxClient)
        assert client.credentials.account_id == "1234567890"
        client.close()

    def test_logs_masked_account(
        self, efax_config: EFaxConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="efax.factory"):
            create_efax_client(efax_config).close()

        record = next(r for r in caplog.records if r.getMessage() == "eFax config resolved")
        assert record.account_id == "1234***"
        assert not hasattr(record, "password")


class TestGetEFaxClient:
    def test_cached_client_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, fax_job: FaxJob
    ) -> None:
        monkeypatch.setenv("EFAX_USERNAME", "env_user")
        monkeypatch.setenv("EFAX_PASSWORD", "env_password")
        monkeypatch.setenv("EFAX_ACCOUNT_ID", "5550001111")
        monkeypatch.setenv("EFAX_TRANSPORT_TYPE", "mock")

        client = get_efax_client()

        assert client is get_efax_client()
        assert client.credentials.username == "env_user"
        assert client.submit_fax(fax_job).doc_id == "MOCK_DOC_000001"
