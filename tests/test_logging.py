"""Tests for structured logging."""

import json
import logging

from sovest.logging import JSONFormatter, LoggerConfig, SensitiveDataFilter, getLogger


def _record(msg: str, args=None, **extra) -> logging.LogRecord:
    record = logging.LogRecord("sovest.test", logging.INFO, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSensitiveDataFilter:
    def test_redacts_json_fields(self) -> None:
        record = _record('payload {"password": "hunter2", "email": "a@b.c"}')
        assert SensitiveDataFilter().filter(record) is True
        assert "hunter2" not in record.msg
        assert '"password": "[REDACTED]"' in record.msg
        assert "a@b.c" in record.msg

    def test_redacts_query_strings(self) -> None:
        record = _record("GET /reset?token=abc123&next=/home")
        SensitiveDataFilter().filter(record)
        assert record.msg == "GET /reset?token=[REDACTED]&next=/home"

    def test_redacts_args(self) -> None:
        record = _record("request %s", ("/login?password=secret",))
        SensitiveDataFilter().filter(record)
        assert record.getMessage() == "request /login?password=[REDACTED]"

    def test_additional_patterns(self) -> None:
        record = _record("ssn=123-45-6789")
        SensitiveDataFilter({"ssn": r"(ssn=)[\d-]+"}).filter(record)
        assert record.msg == "ssn=[REDACTED]"


class TestJSONFormatter:
    def test_fields_and_extras(self) -> None:
        output = json.loads(JSONFormatter().format(_record("Route table built", route_count=12)))
        assert output["message"] == "Route table built"
        assert output["level"] == "INFO"
        assert output["logger"] == "sovest.test"
        assert output["route_count"] == 12


class TestLoggerConfig:
    def test_setup_logger_writes_file(self, tmp_path) -> None:
        logger = LoggerConfig.setup_logger("sovest.logtest", file_name="logtest")
        assert not logger.propagate
        logger.error("boom", extra={"route": "home"})
        for handler in logger.handlers:
            handler.flush()

        line = (tmp_path / "storage" / "logs" / "logtest.log").read_text().strip().splitlines()[-1]
        assert json.loads(line)["route"] == "home"

    def test_levels_by_environment(self) -> None:
        assert LoggerConfig.get_level_by_environment("production") == logging.WARNING
        assert LoggerConfig.get_level_by_environment("testing") == logging.ERROR
        assert LoggerConfig.get_level_by_environment("local") == logging.INFO


class TestGetLogger:
    def test_module_names_pass_through(self) -> None:
        assert getLogger("sovest.http.url").name == "sovest.http.url"

    def test_configured_bare_name(self) -> None:
        assert getLogger("application").name == "application"

    def test_unknown_bare_name_falls_back_to_root(self) -> None:
        assert getLogger("whatever") is logging.getLogger()
