import json

import structlog

from bookstore.infrastructure.logging_config import configure_logging


def test_json_format_emits_one_object_per_line(capsys):
    configure_logging("INFO", "json")
    structlog.get_logger("bookstore.test").info("order_placed", order_id=7)

    record = json.loads(capsys.readouterr().err.strip())
    assert record["event"] == "order_placed"
    assert record["order_id"] == 7
    assert record["level"] == "info"
    assert record["logger"] == "bookstore.test"


def test_level_filters_lower_records(capsys):
    configure_logging("WARNING", "console")
    log = structlog.get_logger("bookstore.test")
    log.info("hidden")
    log.warning("checkout_rejected", reason="empty_cart")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "checkout_rejected" in err
    assert "reason=empty_cart" in err
