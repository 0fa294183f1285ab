"""
eFax client factory.

Single source of truth for configuration:
- use EFaxConfig (Pydantic Settings) which loads from OS env + .env
- never read raw os.getenv("EFAX_*") here
"""

from __future__ import annotations

import logging
from functools import lru_cache

from efax.client import EFaxClient
from efax.config import EFaxConfig, TransportType
from efax.config import get_efax_config as _get_settings_efax_config
from efax.shared.logging import mask, setup_logging
from efax.transport import HttpxTransport, MockTransport, Transport

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_efax_config() -> EFaxConfig:
    """Return cached EFaxConfig loaded from OS env + .env."""
    return _get_settings_efax_config()


def build_transport(cfg: EFaxConfig) -> Transport:
    if cfg.transport_type == TransportType.HTTPX:
        return HttpxTransport(timeout_seconds=cfg.timeout_seconds)

    if cfg.transport_type == TransportType.MOCK:
        return MockTransport()

    raise ValueError(f"Unsupported eFax transport_type: {cfg.transport_type}")


def create_efax_client(cfg: EFaxConfig) -> EFaxClient:
    """Create a client for ``cfg`` with the configured transport."""
    logger.info(
        "eFax config resolved",
        extra={
            "transport_type": cfg.transport_type.value,
            "username": cfg.username,
            "account_id": mask(cfg.account_id),
            "service_url": cfg.service_url,
            "timeout_seconds": cfg.timeout_seconds,
        },
    )
    return EFaxClient(cfg, transport=build_transport(cfg), owns_transport=True)


@lru_cache(maxsize=1)
def get_efax_client() -> EFaxClient:
    """Create and cache the process-wide client from environment config."""
    cfg = get_efax_config()
    setup_logging(cfg.log_level)
    return create_efax_client(cfg)
