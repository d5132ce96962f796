import pytest

from nitroterm.file_system import file_exists, read_file_to_string, write_string_to_file


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "test.txt"
    write_string_to_file(target, "Hello, World!")
    assert read_file_to_string(target) == "Hello, World!"


def test_newlines_are_preserved(tmp_path):
    target = tmp_path / "lines.txt"
    content = "one\r\ntwo\nthree"
    write_string_to_file(str(target), content)
    assert read_file_to_string(str(target)) == content


def test_write_overwrites_existing_content(tmp_path):
    target = tmp_path / "data.txt"
    write_string_to_file(target, "first version of the file")
    write_string_to_file(target, "second")
    assert read_file_to_string(target) == "second"


def test_unicode_round_trip(tmp_path):
    target = tmp_path / "unicode.txt"
    write_string_to_file(target, "🚀 nitroterm ✅")
    assert read_file_to_string(target) == "🚀 nitroterm ✅"


def test_file_exists(tmp_path):
    target = tmp_path / "present.txt"
    assert file_exists(target) is False
    write_string_to_file(target, "")
    assert file_exists(target) is True
    assert file_exists(str(tmp_path)) is True


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_to_string(tmp_path / "missing.txt")