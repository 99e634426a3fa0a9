"""Service for creating, editing and tracking smartlinks.

This is the inbound interface UI collaborators (and the CLI) call into.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smartlinker.helpers.exceptions import NotFoundError
from smartlinker.helpers.logging_helper import log_context
from smartlinker.workflows.smartlink.resolve_smartlink_wf import resolve_into_form_workflow

if TYPE_CHECKING:
    from smartlinker.components.smartlink.odesli_client_comp import OdesliClient
    from smartlinker.helpers.dto.smartlink_dto import Smartlink, SmartlinkData, SmartlinkFormData
    from smartlinker.persistence.db import Database

logger = logging.getLogger(__name__)


class SmartlinkService:
    """Service for smartlink persistence, usage tracking and link resolution.

    Example:
        >>> service = SmartlinkService(db, OdesliClient())
        >>> form, _ = asyncio.run(
        ...     service.resolve_into_form(SmartlinkFormData(), "https://open.spotify.com/track/...")
        ... )
        >>> link = service.create(form)
        >>> service.record_view(link.id)
        True
    """

    def __init__(self, db: Database, client: OdesliClient) -> None:
        """Initialize SmartlinkService.

        Args:
            db: Database instance
            client: Odesli resolver client
        """
        self._db = db
        self._client = client

    # ------------------------------------------------------------------
    # Record store
    # ------------------------------------------------------------------

    def create(self, form: SmartlinkFormData) -> Smartlink:
        """Persist a new smartlink from form data."""
        return self._db.smartlinks.create(form)

    def update(self, smartlink_id: str, form: SmartlinkFormData) -> Smartlink:
        """Replace the editable fields of an existing smartlink.

        Raises:
            NotFoundError: If smartlink_id does not exist
        """
        return self._db.smartlinks.update(smartlink_id, form)

    def get_smartlink(self, smartlink_id: str) -> Smartlink:
        """Get a smartlink by id.

        Raises:
            NotFoundError: If smartlink_id does not exist
        """
        smartlink = self._db.smartlinks.get(smartlink_id)
        if smartlink is None:
            raise NotFoundError(smartlink_id)
        return smartlink

    def find_smartlink(self, smartlink_id: str) -> Smartlink | None:
        """Get a smartlink by id, or None."""
        return self._db.smartlinks.get(smartlink_id)

    def list_smartlinks(self) -> list[Smartlink]:
        """List all smartlinks in creation order."""
        return self._db.smartlinks.list()

    def delete(self, smartlink_id: str) -> bool:
        """Delete a smartlink. Returns False if it did not exist."""
        return self._db.smartlinks.delete(smartlink_id)

    # ------------------------------------------------------------------
    # Usage tracking (speculative calls from page handlers never raise)
    # ------------------------------------------------------------------

    def record_view(self, smartlink_id: str) -> bool:
        """Count one page view. Unknown ids are ignored."""
        with log_context(smartlink_id=smartlink_id):
            return self._db.smartlinks.record_view(smartlink_id)

    def record_click(self, smartlink_id: str, platform_id: str) -> bool:
        """Count one click on a platform link. Unknown ids are ignored."""
        with log_context(smartlink_id=smartlink_id, platform=platform_id):
            return self._db.smartlinks.record_click(smartlink_id, platform_id)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    async def resolve_url(self, url: str) -> SmartlinkData:
        """Resolve a music URL without touching any form state.

        Raises:
            ResolutionError: If resolution fails
        """
        return await self._client.resolve(url)

    async def resolve_into_form(
        self, form: SmartlinkFormData, url: str
    ) -> tuple[SmartlinkFormData, SmartlinkData]:
        """Resolve a music URL and merge it into form state.

        Raises:
            InvalidUrlError: If the URL is not a supported music link
            ResolutionError: If resolution fails
        """
        return await resolve_into_form_workflow(self._client, form, url)

    def close(self) -> None:
        """Release the underlying database connection."""
        self._db.close()


__all__ = ["SmartlinkService"]
