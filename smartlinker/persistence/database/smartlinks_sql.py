"""Smartlink record store operations.

Each smartlink is stored as one JSON payload using the camelCase field names
of the published data model. Rows keep creation order via ``seq``.
"""

from __future__ import annotations

import json
import logging
import random
import sqlite3
import string
import threading
from dataclasses import replace
from typing import Any

from smartlinker.helpers.dto.smartlink_dto import (
    PlatformLink,
    Smartlink,
    SmartlinkAnalytics,
    SmartlinkCustomization,
    SmartlinkFormData,
)
from smartlinker.helpers.exceptions import NotFoundError
from smartlinker.helpers.time_helper import now_iso, now_ms

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_SUFFIX_LENGTH = 9


class SmartlinkOperations:
    """Operations for the smartlinks table.

    All public methods hold the database lock for their full
    read-modify-write and commit before returning.
    """

    def __init__(self, conn: sqlite3.Connection, lock: threading.RLock) -> None:
        self.conn = conn
        self._lock = lock

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create(self, form: SmartlinkFormData) -> Smartlink:
        """Persist a new smartlink built from form data.

        Returns:
            The stored record (fresh id, created_at == updated_at, zero counters)
        """
        with self._lock:
            smartlink_id = self._issue_id()
            timestamp = now_iso()
            smartlink = Smartlink(
                id=smartlink_id,
                title=form.title,
                artist=form.artist,
                description=form.description,
                release_date=form.release_date,
                cover_image=form.cover_image,
                platforms=tuple(form.platforms),
                analytics=form.analytics,
                customization=form.customization,
                created_at=timestamp,
                updated_at=timestamp,
                views=0,
                clicks={},
            )
            self.conn.execute(
                "INSERT INTO smartlinks(id, payload, created_at) VALUES(?,?,?)",
                (smartlink_id, _dump(smartlink), timestamp),
            )
            self.conn.commit()

        logger.info(f"Created smartlink {smartlink_id} ('{form.title}')")
        return smartlink

    def update(self, smartlink_id: str, form: SmartlinkFormData) -> Smartlink:
        """Replace the editable fields of a smartlink.

        id, created_at, views and clicks are preserved; updated_at is refreshed.

        Raises:
            NotFoundError: If smartlink_id does not exist
        """
        with self._lock:
            current = self._load(smartlink_id)
            if current is None:
                raise NotFoundError(smartlink_id)

            updated = replace(
                current,
                title=form.title,
                artist=form.artist,
                description=form.description,
                release_date=form.release_date,
                cover_image=form.cover_image,
                platforms=tuple(form.platforms),
                analytics=form.analytics,
                customization=form.customization,
                updated_at=now_iso(),
            )
            self._store(updated)

        logger.info(f"Updated smartlink {smartlink_id}")
        return updated

    def get(self, smartlink_id: str) -> Smartlink | None:
        """Get a smartlink by id, or None."""
        with self._lock:
            return self._load(smartlink_id)

    def list(self) -> list[Smartlink]:
        """List all smartlinks in creation order."""
        with self._lock:
            cur = self.conn.execute("SELECT payload FROM smartlinks ORDER BY seq")
            rows = cur.fetchall()
        return [_load_payload(row[0]) for row in rows]

    def count(self) -> int:
        """Number of stored smartlinks."""
        with self._lock:
            cur = self.conn.execute("SELECT COUNT(*) FROM smartlinks")
            return int(cur.fetchone()[0])

    def delete(self, smartlink_id: str) -> bool:
        """Delete a smartlink.

        Returns:
            True if a record existed and was removed
        """
        with self._lock:
            cur = self.conn.execute("DELETE FROM smartlinks WHERE id=?", (smartlink_id,))
            self.conn.commit()
            deleted = cur.rowcount > 0

        if deleted:
            logger.info(f"Deleted smartlink {smartlink_id}")
        return deleted

    # ------------------------------------------------------------------
    # Usage counters (do not refresh updated_at)
    # ------------------------------------------------------------------

    def record_view(self, smartlink_id: str) -> bool:
        """Increment the view counter.

        Returns:
            False (and does nothing) if the smartlink is unknown
        """
        with self._lock:
            current = self._load(smartlink_id)
            if current is None:
                logger.warning(f"View recorded for unknown smartlink {smartlink_id}; ignored")
                return False
            self._store(replace(current, views=current.views + 1))
        return True

    def record_click(self, smartlink_id: str, platform_id: str) -> bool:
        """Increment the click counter of one platform.

        The platform does not need to be in the smartlink's platform list.

        Returns:
            False (and does nothing) if the smartlink is unknown
        """
        with self._lock:
            current = self._load(smartlink_id)
            if current is None:
                logger.warning(f"Click on '{platform_id}' recorded for unknown smartlink {smartlink_id}; ignored")
                return False
            clicks = dict(current.clicks)
            clicks[platform_id] = clicks.get(platform_id, 0) + 1
            self._store(replace(current, clicks=clicks))
        return True

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _load(self, smartlink_id: str) -> Smartlink | None:
        cur = self.conn.execute("SELECT payload FROM smartlinks WHERE id=?", (smartlink_id,))
        row = cur.fetchone()
        return _load_payload(row[0]) if row else None

    def _store(self, smartlink: Smartlink) -> None:
        self.conn.execute(
            "UPDATE smartlinks SET payload=? WHERE id=?",
            (_dump(smartlink), smartlink.id),
        )
        self.conn.commit()

    def _issue_id(self) -> str:
        """Generate an id never handed out before and record it as issued."""
        while True:
            suffix = "".join(random.choices(_ID_ALPHABET, k=_ID_SUFFIX_LENGTH))
            candidate = f"smartlink-{now_ms()}-{suffix}"
            try:
                self.conn.execute(
                    "INSERT INTO issued_ids(id, issued_at) VALUES(?,?)",
                    (candidate, now_ms()),
                )
            except sqlite3.IntegrityError:
                logger.debug(f"Id collision on {candidate}, retrying")
                continue
            return candidate


# ----------------------------------------------------------------------
#  Serialization (camelCase payload <-> dataclasses)
# ----------------------------------------------------------------------


def to_payload(smartlink: Smartlink) -> dict[str, Any]:
    """Serialize a smartlink to its persisted JSON shape."""
    analytics: dict[str, str] = {}
    if smartlink.analytics.gtm_id is not None:
        analytics["gtmId"] = smartlink.analytics.gtm_id
    if smartlink.analytics.ga4_id is not None:
        analytics["ga4Id"] = smartlink.analytics.ga4_id

    return {
        "id": smartlink.id,
        "title": smartlink.title,
        "description": smartlink.description,
        "coverImage": smartlink.cover_image,
        "artist": smartlink.artist,
        "releaseDate": smartlink.release_date,
        "platforms": [
            {"id": p.id, "name": p.name, "url": p.url, "icon": p.icon, "color": p.color}
            for p in smartlink.platforms
        ],
        "analytics": analytics,
        "customization": {
            "backgroundColor": smartlink.customization.background_color,
            "textColor": smartlink.customization.text_color,
            "buttonColor": smartlink.customization.button_color,
            "buttonTextColor": smartlink.customization.button_text_color,
        },
        "createdAt": smartlink.created_at,
        "updatedAt": smartlink.updated_at,
        "views": smartlink.views,
        "clicks": dict(smartlink.clicks),
    }


def from_payload(payload: dict[str, Any]) -> Smartlink:
    """Build a smartlink from its persisted JSON shape."""
    analytics = payload.get("analytics") or {}
    customization = payload.get("customization") or {}
    defaults = SmartlinkCustomization()

    return Smartlink(
        id=payload["id"],
        title=payload.get("title", ""),
        artist=payload.get("artist", ""),
        description=payload.get("description", ""),
        release_date=payload.get("releaseDate", ""),
        cover_image=payload.get("coverImage", ""),
        platforms=tuple(
            PlatformLink(id=p["id"], name=p["name"], url=p["url"], icon=p["icon"], color=p["color"])
            for p in payload.get("platforms", [])
        ),
        analytics=SmartlinkAnalytics(
            gtm_id=analytics.get("gtmId"),
            ga4_id=analytics.get("ga4Id"),
        ),
        customization=SmartlinkCustomization(
            background_color=customization.get("backgroundColor", defaults.background_color),
            text_color=customization.get("textColor", defaults.text_color),
            button_color=customization.get("buttonColor", defaults.button_color),
            button_text_color=customization.get("buttonTextColor", defaults.button_text_color),
        ),
        created_at=payload["createdAt"],
        updated_at=payload["updatedAt"],
        views=int(payload.get("views", 0)),
        clicks={k: int(v) for k, v in (payload.get("clicks") or {}).items()},
    )


def _dump(smartlink: Smartlink) -> str:
    return json.dumps(to_payload(smartlink), ensure_ascii=False)


def _load_payload(raw: str) -> Smartlink:
    return from_payload(json.loads(raw))
