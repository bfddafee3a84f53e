"""Redaction of provider API keys from text and structured log payloads."""

from __future__ import annotations

import json
import logging

from weather_lookup.log_setup import JsonConsoleFormatter
from weather_lookup.redaction import REDACTED, sanitize_for_logging, sanitize_text


def test_query_string_keys_are_redacted() -> None:
    text = (
        "GET https://api.openweathermap.org/data/2.5/weather?units=metric&q=Paris&appid=abc123 "
        "and http://dataservice.accuweather.com/currentconditions/v1/42?apikey=zzz"
    )
    sanitized = sanitize_text(text)
    assert "abc123" not in sanitized
    assert "zzz" not in sanitized
    assert f"appid={REDACTED}" in sanitized
    assert "q=Paris" in sanitized


def test_nested_api_key_fields_are_redacted() -> None:
    payload = {
        "records": [{"name": "home", "api_key": "k1"}],
        "note": "token: secret-value",
    }
    sanitized = sanitize_for_logging(payload)
    assert sanitized["records"][0] == {"name": "home", "api_key": REDACTED}
    assert "secret-value" not in sanitized["note"]


def test_json_console_formatter_redacts_message() -> None:
    record = logging.LogRecord(
        name="weather_lookup",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Request to %s failed",
        args=("https://example.test/weather?q=Rome&appid=abc123",),
        exc_info=None,
    )
    event = json.loads(JsonConsoleFormatter().format(record))
    assert event["level"] == "WARNING"
    assert event["logger"] == "weather_lookup"
    assert "abc123" not in event["message"]
    assert "q=Rome" in event["message"]


def test_json_console_formatter_adds_command_and_provider_fields() -> None:
    record = logging.LogRecord(
        name="weather_lookup",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Weather lookup failed",
        args=(),
        exc_info=None,
    )
    record.command = "GetWeather"
    record.provider = "home"

    event = json.loads(JsonConsoleFormatter().format(record))

    assert event["command"] == "GetWeather"
    assert event["provider"] == "home"
