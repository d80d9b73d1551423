from pathlib import Path

import pytest

from ypts import data_process


def test_get_all_files_recurses_and_skips_directories(tmp_path):
    (tmp_path / "sub" / "deeper").mkdir(parents=True)
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub" / "b.txt").write_text("b")
    (tmp_path / "sub" / "deeper" / "c.bin").write_text("c")
    found = data_process.get_all_files(tmp_path)
    assert sorted(Path(p) for p in found) == sorted(
        [tmp_path / "a.txt", tmp_path / "sub" / "b.txt", tmp_path / "sub" / "deeper" / "c.bin"]
    )


def test_get_all_files_empty_directory(tmp_path):
    assert data_process.get_all_files(tmp_path) == []


def test_get_all_files_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        data_process.get_all_files(tmp_path / "missing")


def test_get_all_files_on_file(tmp_path):
    target = tmp_path / "f"
    target.write_text("x")
    with pytest.raises(NotADirectoryError):
        data_process.get_all_files(target)


def test_is_dir_has_file_missing(tmp_path, capsys):
    assert data_process.is_dir_has_file(tmp_path / "missing") is False
    assert "路径不存在" in capsys.readouterr().out


def test_is_dir_has_file_on_file(tmp_path, capsys):
    target = tmp_path / "f"
    target.write_text("x")
    assert data_process.is_dir_has_file(target) is False
    assert "路径不是目录" in capsys.readouterr().out


def test_is_dir_has_file_empty_and_filled(tmp_path):
    assert data_process.is_dir_has_file(tmp_path) is False
    (tmp_path / "sub").mkdir()
    assert data_process.is_dir_has_file(tmp_path) is True


@pytest.mark.parametrize(
    ("text", "sep", "expected"),
    [
        ("a,b,,c", ",", ["a", "b", "", "c"]),
        ("none", ",", ["none"]),
        ("x::y::z", "::", ["x", "y", "z"]),
        ("", ",", [""]),
    ],
)
def test_part_str(text, sep, expected):
    assert data_process.part_str(text, sep) == expected


def test_part_str_join_round_trip():
    text = "k=v;k2=v2;;end"
    assert ";".join(data_process.part_str(text, ";")) == text


def test_part_str_empty_separator_raises():
    with pytest.raises(ValueError):
        data_process.part_str("abc", "")


@pytest.mark.parametrize(
    ("text", "sep", "expected"),
    [
        ("key=value=more", "=", ("key", "value=more")),
        ("no-separator", "=", ("no-separator", "")),
        ("a::b", "::", ("a", "b")),
        ("abc", "", ("", "abc")),
    ],
)
def test_part_str_once(text, sep, expected):
    assert data_process.part_str_once(text, sep) == expected