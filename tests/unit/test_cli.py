import io
import logging
import re

import pytest

from status_reporting import cli

LINE_PREFIX = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}> "


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("status_reporting")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in original_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(original_level)


def test_execution_message_to_stdout(capsys):
    exit_code = cli.main(["build", "complete"])

    captured = capsys.readouterr()
    assert exit_code == cli.EXIT_OK
    assert re.fullmatch(LINE_PREFIX + r"build complete\n", captured.out)
    assert captured.err == ""


def test_error_with_context_to_stderr(capsys):
    exit_code = cli.main(["--kind", "error", "--caller", "flush", "--app-name", "myapp", "disk full"])

    captured = capsys.readouterr()
    assert exit_code == cli.EXIT_OK
    assert captured.out == ""
    assert re.fullmatch(LINE_PREFIX + r"myapp: ERROR in 'flush': disk full\n", captured.err)


def test_empty_message(capsys):
    cli.main(["--caller", "init"])

    assert re.fullmatch(LINE_PREFIX + r"in 'init': \n", capsys.readouterr().out)


def test_unknown_kind_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--kind", "fatal", "x"])

    assert excinfo.value.code == 2


def test_write_failure_exit_code(monkeypatch):
    closed = io.StringIO()
    closed.close()
    monkeypatch.setattr("sys.stdout", closed)

    assert cli.main(["lost"]) == cli.EXIT_WRITE_FAILURE


def test_configuration_error_exit_code(monkeypatch):
    monkeypatch.setenv("STATUS_REPORTER_TIMEZONE", "Bad/Zone")

    assert cli.main(["x"]) == cli.EXIT_USAGE


def test_no_flush_overrides_invalid_flush_env(monkeypatch, capsys):
    monkeypatch.setenv("STATUS_REPORTER_FLUSH", "maybe")

    exit_code = cli.main(["--no-flush", "written anyway"])

    assert exit_code == cli.EXIT_OK
    assert re.fullmatch(LINE_PREFIX + r"written anyway\n", capsys.readouterr().out)
