import re

import pytest

from patternkit.logsetup import configure_loggers, main

LINE = re.compile(
    r"^(?P<prefix>[A-Z]+: )\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} "
    r"test_logsetup\.py:\d+: (?P<message>.*)$"
)


def test_info_goes_to_stdout_with_prefix(tmp_path, capsys):
    with configure_loggers(tmp_path / "errors.txt") as loggers:
        loggers.info.info("Special Information")
    captured = capsys.readouterr()
    match = LINE.match(captured.out.strip())
    assert match is not None
    assert match["prefix"] == "INFO: "
    assert match["message"] == "Special Information"
    assert captured.err == ""


def test_warning_goes_to_stdout(tmp_path, capsys):
    with configure_loggers(tmp_path / "errors.txt") as loggers:
        loggers.warning.info("There is something you need to know about")
    out = capsys.readouterr().out
    assert out.startswith("WARNING: ")
    assert out.rstrip().endswith("There is something you need to know about")


def test_trace_is_discarded(tmp_path, capsys):
    path = tmp_path / "errors.txt"
    with configure_loggers(path) as loggers:
        loggers.trace.info("I have something standard to say")
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""
    assert path.read_text() == ""


def test_error_goes_to_file_and_stderr(tmp_path, capsys):
    path = tmp_path / "errors.txt"
    with configure_loggers(path) as loggers:
        loggers.error.info("Something has failed")
    err = capsys.readouterr().err.strip()
    written = path.read_text().strip()
    assert err == written
    match = LINE.match(written)
    assert match is not None
    assert match["prefix"] == "ERROR: "
    assert match["message"] == "Something has failed"


def test_error_file_is_appended(tmp_path):
    path = tmp_path / "errors.txt"
    for message in ("first", "second"):
        with configure_loggers(path) as loggers:
            loggers.error.info(message)
    lines = path.read_text().splitlines()
    assert [line.rsplit(": ", 1)[-1] for line in lines] == ["first", "second"]


def test_unopenable_error_file(tmp_path):
    with pytest.raises(OSError):
        configure_loggers(tmp_path / "missing" / "errors.txt")


def test_main_reports_unopenable_file(tmp_path, capsys):
    assert main(["--errors", str(tmp_path / "missing" / "errors.txt")]) == 1
    assert "Failed to open error log file:" in capsys.readouterr().err


def test_main_writes_error_file(tmp_path, capsys):
    path = tmp_path / "errors.txt"
    assert main(["--errors", str(path)]) == 0
    assert "Something has failed" in path.read_text()
    assert "Special Information" in capsys.readouterr().out