import pytest

from jiebaseg.config import Config


def write(tmp_path, text):
    path = tmp_path / "app.conf"
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_values(tmp_path):
    config = Config(write(tmp_path, "# comment\n\nname = demo\nport=8080\n"))
    assert config.get("name") == "demo"
    assert config["port"] == "8080"
    assert config.get_int("port", 0) == 8080
    assert bool(config)


def test_defaults_for_missing_keys(tmp_path):
    config = Config(write(tmp_path, "name = demo\n"))
    assert config.get("missing", "fallback") == "fallback"
    assert config.get_int("missing", 7) == 7
    with pytest.raises(KeyError):
        config["missing"]


def test_non_numeric_int_is_zero(tmp_path):
    config = Config(write(tmp_path, "name = demo\n"))
    assert config.get_int("name", 5) == 0


def test_empty_file_is_false(tmp_path):
    config = Config(write(tmp_path, "# only a comment\n"))
    assert not config
    assert str(config) == "{}"


def test_str_lists_sorted_pairs(tmp_path):
    config = Config(write(tmp_path, "b = 2\na = 1\n"))
    assert str(config) == "{a:1, b:2}"


def test_duplicate_key_raises(tmp_path):
    with pytest.raises(ValueError):
        Config(write(tmp_path, "a = 1\na = 2\n"))


@pytest.mark.parametrize("line", ["a=b=c", "novalue", "a="])
def test_illegal_line_raises(tmp_path, line):
    with pytest.raises(ValueError):
        Config(write(tmp_path, line + "\n"))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(tmp_path / "absent.conf")