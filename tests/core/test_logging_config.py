from __future__ import annotations

import json

import structlog

from voyagerprofile.logging import configure_logging


def test_configure_logging_renders_json_to_stderr(capsys):
    configure_logging("WARNING")
    try:
        logger = structlog.get_logger("voyagerprofile.test")
        logger.info("hidden.event")
        logger.warning("section.missing_reference", urn="urn:li:gone")

        captured = capsys.readouterr()
    finally:
        structlog.reset_defaults()

    assert captured.out == ""
    lines = [json.loads(line) for line in captured.err.splitlines() if line.strip()]
    assert [line["event"] for line in lines] == ["section.missing_reference"]
    assert lines[0]["level"] == "warning"
    assert lines[0]["urn"] == "urn:li:gone"
