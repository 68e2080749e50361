import logging

import pytest

from witness.errors import IntrospectionError, LineRangeError, SourceUnavailableError
from witness.introspection import extract_expression_name, resolve_line


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "sample.py"
    path.write_text("first = 1\n    debug(\"v\", first)\n\nlast = 3\n", encoding="utf-8")
    return path


def test_resolve_line_returns_requested_line(source_file):
    assert resolve_line(source_file, 1) == "first = 1"
    assert resolve_line(str(source_file), 2) == '    debug("v", first)'
    assert resolve_line(source_file, 3) == ""
    assert resolve_line(source_file, 4) == "last = 3"


def test_resolve_line_rereads_the_file(source_file):
    assert resolve_line(source_file, 1) == "first = 1"

    source_file.write_text("first = 100\n", encoding="utf-8")

    assert resolve_line(source_file, 1) == "first = 100"


@pytest.mark.parametrize("line_number", [0, -1, 5, 100])
def test_resolve_line_rejects_out_of_range(source_file, line_number):
    with pytest.raises(LineRangeError) as exc_info:
        resolve_line(source_file, line_number)

    assert exc_info.value.line_number == line_number
    assert exc_info.value.total_lines == 4


def test_resolve_line_reports_unreadable_file(tmp_path):
    missing = tmp_path / "missing.py"

    with pytest.raises(SourceUnavailableError) as exc_info:
        resolve_line(missing, 1)

    assert exc_info.value.file_path == missing
    assert isinstance(exc_info.value.__cause__, OSError)
    assert isinstance(exc_info.value, IntrospectionError)


def test_extract_expression_name_returns_argument_text():
    assert extract_expression_name('Debug("v", foo)') == "foo"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ('    debug("r", names)', "names"),
        ('value = debug("x", user.age)', "user.age"),
        ('debug("", compute(a, b))', "compute(a, b)"),
        ('debug("s", {"k": [1, 2]})   ', '{"k": [1, 2]}'),
    ],
)
def test_extract_expression_name_handles_common_lines(line, expected):
    assert extract_expression_name(line) == expected


def test_extract_expression_name_degrades_without_delimiter(caplog):
    with caplog.at_level(logging.WARNING, logger="witness.introspection.source"):
        assert extract_expression_name("debug(") == ""

    assert "Cannot find the expression argument" in caplog.text


def test_extract_expression_name_keeps_unclosed_remainder(caplog):
    with caplog.at_level(logging.WARNING, logger="witness.introspection.source"):
        assert extract_expression_name('debug("v", value  # note') == "value  # note"

    assert "does not end on this line" in caplog.text
