"""CLI Bootstrap Service - Service Container for CLI Commands.

Provides clean DI for CLI commands.

Architecture:
- CLI commands should NOT import persistence modules directly
- CLI commands SHOULD use these bootstrap functions to get service instances
- Services are instantiated with proper DI (Database, config, client)
"""

from __future__ import annotations

import logging

from smartlinker.components.smartlink.odesli_client_comp import OdesliClient
from smartlinker.persistence.db import Database
from smartlinker.services.config_svc import ConfigService
from smartlinker.services.domain.smartlink_svc import SmartlinkService

logger = logging.getLogger(__name__)


def get_config_service() -> ConfigService:
    """Get ConfigService instance for CLI operations."""
    return ConfigService()


def get_database(config_service: ConfigService | None = None) -> Database:
    """Get Database instance for CLI operations.

    Uses ConfigService to get db_path, respecting YAML config and env vars.
    """
    config_service = config_service or get_config_service()
    db_path = str(config_service.get("db_path"))
    logger.debug(f"Opening database {db_path}")
    return Database(db_path)


def get_smartlink_service(config_service: ConfigService | None = None) -> SmartlinkService:
    """Get SmartlinkService instance wired with database and resolver client.

    Example:
        >>> service = get_smartlink_service()
        >>> service.list_smartlinks()
    """
    config_service = config_service or get_config_service()
    db = get_database(config_service)
    client = OdesliClient(config_service.make_resolver_config())
    return SmartlinkService(db, client)


def get_resolver_client(config_service: ConfigService | None = None) -> OdesliClient:
    """Get an OdesliClient for commands that resolve without touching the database."""
    config_service = config_service or get_config_service()
    return OdesliClient(config_service.make_resolver_config())
