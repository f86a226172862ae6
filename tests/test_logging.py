import logging

from wsdot_client.core.logging import LogfmtFormatter, setup_logging
from wsdot_client.core.observability import log_event


def _record(msg, **extra):
    record = logging.LogRecord(
        name="wsdot_client.observability",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_includes_known_extras_only():
    line = LogfmtFormatter().format(
        _record(
            "wsdot_call",
            strategy="native",
            endpoint="https://example.test/ferries/api/vessels/rest/vessellocations",
            status=200,
            duration_ms=12,
            secret="nope",
        )
    )

    assert line.startswith("level=info logger=wsdot_client.observability event=wsdot_call")
    assert "strategy=native" in line
    assert "status=200" in line
    assert "duration_ms=12" in line
    assert "secret" not in line


def test_logfmt_quotes_values_with_spaces():
    line = LogfmtFormatter().format(_record("wsdot call", error_type='say "hi"', url=""))
    assert 'event="wsdot call"' in line
    assert 'error_type="say \\"hi\\""' in line
    assert 'url=""' in line


def test_logfmt_masks_access_code_in_url_fields():
    line = LogfmtFormatter().format(
        _record(
            "wsdot.request",
            url="https://example.test/ferries/api/vessels/rest/vessellocations?apiaccesscode=secret",
            endpoint="https://example.test/Traffic/api/x.svc/GetAlertAsJson?AlertID=1&AccessCode=secret",
        )
    )

    assert "secret" not in line
    assert "url=https://example.test/ferries/api/vessels/rest/vessellocations?apiaccesscode=***" in line
    assert "AlertID=1&AccessCode=***" in line


def test_log_event_drops_reserved_keys(caplog):
    caplog.set_level(logging.INFO, logger="wsdot_client.observability")
    log_event("wsdot_call", status=200, module="overwritten?")

    record = next(r for r in caplog.records if r.getMessage() == "wsdot_call")
    assert record.status == 200
    assert record.module != "overwritten?"


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("debug")
        setup_logging("debug")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, LogfmtFormatter)
        assert root.level == logging.DEBUG
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
