import json
import logging

from lookup_broker.core.logging import JsonFormatter, RequestIdFilter, request_id_var


def make_record(**extra) -> logging.LogRecord:
    record = logging.getLogger("lookup_broker.test").makeRecord(
        "lookup_broker.test", logging.WARNING, __file__, 1, "lookup %s", ("failed",), None, extra=extra,
    )
    RequestIdFilter().filter(record)
    return record


def test_formatter_emits_every_extra_key():
    line = JsonFormatter().format(make_record(upstream="census", zip="76102", attempt=1, latency_ms=12.5))

    payload = json.loads(line)
    assert payload["level"] == "WARNING"
    assert payload["msg"] == "lookup failed"
    assert payload["logger"] == "lookup_broker.test"
    assert payload["upstream"] == "census"
    assert payload["zip"] == "76102"
    assert payload["attempt"] == 1
    assert payload["latency_ms"] == 12.5
    # standard record attributes stay out
    assert "pathname" not in payload
    assert "args" not in payload


def test_formatter_stringifies_unserializable_extras():
    payload = json.loads(JsonFormatter().format(make_record(point=object())))

    assert payload["point"].startswith("<object object")


def test_request_id_comes_from_context():
    token = request_id_var.set("req-42")
    try:
        payload = json.loads(JsonFormatter().format(make_record()))
    finally:
        request_id_var.reset(token)

    assert payload["request_id"] == "req-42"


def test_no_request_id_outside_a_request():
    payload = json.loads(JsonFormatter().format(make_record()))

    assert "request_id" not in payload
