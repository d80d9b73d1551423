import pytest

from ypts import paths


@pytest.mark.parametrize(
    ("func", "expected"),
    [
        (paths.data, "data/"),
        (paths.res, "res/"),
        (paths.rep, "rep/"),
        (paths.log, "log/"),
        (paths.bin, "bin/"),
        (paths.temp, "temp/"),
    ],
)
def test_directory_names(func, expected):
    assert func() == expected


def test_all_names_are_distinct_and_end_with_slash():
    names = [paths.data(), paths.res(), paths.rep(), paths.log(), paths.bin(), paths.temp()]
    assert len(set(names)) == len(names)
    assert all(name.endswith("/") for name in names)