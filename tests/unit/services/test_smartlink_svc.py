"""Unit tests for SmartlinkService.

Uses a real in-memory database and a mocked resolver client.
"""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from smartlinker.components.smartlink.response_normalizer_comp import normalize
from smartlinker.helpers.dto.smartlink_dto import SmartlinkFormData
from smartlinker.helpers.exceptions import InvalidUrlError, NotFoundError
from smartlinker.helpers.logging_helper import SmartlinkerLogFilter
from smartlinker.services.domain.smartlink_svc import SmartlinkService


@pytest.fixture
def client(odesli_response) -> MagicMock:
    mock = MagicMock()
    mock.resolve = AsyncMock(return_value=normalize(odesli_response))
    return mock


@pytest.fixture
def service(in_memory_db, client) -> SmartlinkService:
    return SmartlinkService(in_memory_db, client)


class TestRecordStore:
    @pytest.mark.unit
    def test_create_then_get(self, service, sample_form) -> None:
        created = service.create(sample_form)
        assert service.get_smartlink(created.id) == created
        assert service.find_smartlink(created.id) == created

    @pytest.mark.unit
    def test_get_unknown_raises(self, service) -> None:
        with pytest.raises(NotFoundError):
            service.get_smartlink("smartlink-missing")
        assert service.find_smartlink("smartlink-missing") is None

    @pytest.mark.unit
    def test_update_and_list(self, service, sample_form) -> None:
        first = service.create(sample_form)
        second = service.create(SmartlinkFormData(title="Second"))

        service.update(first.id, SmartlinkFormData(title="Renamed"))

        listed = service.list_smartlinks()
        assert [s.id for s in listed] == [first.id, second.id]
        assert listed[0].title == "Renamed"

    @pytest.mark.unit
    def test_delete(self, service, sample_form) -> None:
        created = service.create(sample_form)
        assert service.delete(created.id) is True
        assert service.delete(created.id) is False
        assert service.list_smartlinks() == []


class TestTracking:
    @pytest.mark.unit
    def test_views_and_clicks(self, service, sample_form) -> None:
        created = service.create(sample_form)

        assert service.record_view(created.id) is True
        assert service.record_click(created.id, "spotify") is True
        assert service.record_click(created.id, "spotify") is True

        stored = service.get_smartlink(created.id)
        assert stored.views == 1
        assert stored.clicks_for("spotify") == 2
        assert stored.updated_at == created.updated_at

    @pytest.mark.unit
    def test_counter_logs_carry_smartlink_context(self, service, caplog) -> None:
        caplog.handler.addFilter(SmartlinkerLogFilter())

        with caplog.at_level(logging.WARNING):
            service.record_click("smartlink-missing", "deezer")

        [record] = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert record.context_str == "[smartlink_id=smartlink-missing platform=deezer] "

    @pytest.mark.unit
    def test_unknown_ids_do_not_raise(self, service) -> None:
        assert service.record_view("nope") is False
        assert service.record_click("nope", "spotify") is False


class TestResolution:
    @pytest.mark.unit
    def test_resolve_url_delegates_to_client(self, service, client) -> None:
        data = asyncio.run(service.resolve_url("https://open.spotify.com/track/abc"))
        assert data.title == "Midnight City"
        client.resolve.assert_awaited_once()

    @pytest.mark.unit
    def test_resolve_into_form_then_create(self, service) -> None:
        form, _ = asyncio.run(
            service.resolve_into_form(SmartlinkFormData(), "https://open.spotify.com/track/abc")
        )
        created = service.create(form)

        assert created.title == "Midnight City"
        assert {p.id for p in created.platforms} == {"spotify", "appleMusic", "youtubeMusic", "deezer"}

    @pytest.mark.unit
    def test_resolve_into_form_rejects_unsupported_urls(self, service, client) -> None:
        with pytest.raises(InvalidUrlError):
            asyncio.run(service.resolve_into_form(SmartlinkFormData(), "not a url"))
        client.resolve.assert_not_awaited()


class TestClose:
    @pytest.mark.unit
    def test_close_releases_database(self, client) -> None:
        db = MagicMock()
        SmartlinkService(db, client).close()
        db.close.assert_called_once()
