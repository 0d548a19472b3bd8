"""Settings and error mapping — configuration validation and status codes."""

import json
import logging

import pytest
from pydantic import ValidationError

from gift_exchange.api.error_handlers import STATUS_BY_KIND, failure_response
from gift_exchange.config import Settings
from gift_exchange.core.domain_types import ErrorKind
from gift_exchange.core.errors import ConcurrencyError, ErrorContext
from gift_exchange.core.result import Err
from gift_exchange.infrastructure.observability import JSONFormatter


def test_every_error_kind_has_a_status():
    assert STATUS_BY_KIND == {
        ErrorKind.NOT_FOUND: 404,
        ErrorKind.BAD_REQUEST: 400,
        ErrorKind.FORBIDDEN: 403,
        ErrorKind.NOT_AUTHORIZED: 401,
    }


def test_failure_response_uses_kind_status():
    res = failure_response(Err.not_authorized("id", "Different rooms."))
    assert res.status_code == 401
    assert json.loads(res.body)["error"]["details"] == [
        {"field": "id", "message": "Different rooms."},
    ]


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.default_min_users_limit == 3
    assert settings.default_max_users_limit == 20
    assert settings.draw_seed is None


def test_settings_reject_max_below_min():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_min_users_limit=5, default_max_users_limit=4)


def test_concurrency_error_envelope():
    exc = ConcurrencyError("stale", ErrorContext(room_id=3))
    body = exc.to_response()["error"]
    assert body["code"] == "CONCURRENCY_CONFLICT"
    assert body["category"] == "conflict"
    assert body["context"]["room_id"] == 3


def test_json_formatter_surfaces_room_extras():
    record = logging.LogRecord("gift_exchange", logging.INFO, __file__, 1, "Room drawn", (), None)
    record.room_id = 5
    record.error_kind = "bad_request"
    log = json.loads(JSONFormatter().format(record))
    assert log["message"] == "Room drawn"
    assert log["room_id"] == 5
    assert log["error_kind"] == "bad_request"
    assert "user_id" not in log
