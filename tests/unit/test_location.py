import pytest

from witness.errors import LineNumberError, LocationFormatError
from witness.introspection import SourceLocation, parse_location


def test_parse_location_reads_path_and_line():
    location = parse_location('File "/srv/app/tests/test_api.py", line 42, in test_login')

    assert location == SourceLocation(file_path="/srv/app/tests/test_api.py", line_number=42)
    assert str(location) == "/srv/app/tests/test_api.py:42"


def test_parse_location_ignores_surrounding_whitespace():
    location = parse_location('    File "/tmp/with space/x.py", line 7, in <module>  ')

    assert location.file_path == "/tmp/with space/x.py"
    assert location.line_number == 7


def test_parse_location_accepts_trailing_text_without_comma():
    assert parse_location('File "a.py", line 3 extra').line_number == 3


def test_parse_location_rejects_missing_marker():
    with pytest.raises(LocationFormatError):
        parse_location("/srv/app/tests/test_api.py:42 +0x1d")


def test_parse_location_rejects_empty_path():
    with pytest.raises(LocationFormatError):
        parse_location('File "", line 3, in f')


@pytest.mark.parametrize("line", ["abc", "", "0", "-4", "None"])
def test_parse_location_rejects_bad_line_numbers(line):
    with pytest.raises(LineNumberError):
        parse_location(f'File "a.py", line {line}, in f')


def test_location_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_location("nothing here")
