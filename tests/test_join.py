import logging

import pytest

from os_path import parser
from os_path.joiner import join, strip_root
from os_path.platform import Platform


def test_false_root(posix):
    assert posix("/foo/bar").join("/baz.txt") == posix("/foo/bar/baz.txt")


def test_false_root_directory(posix):
    assert posix("/test/path/").join("/more/path/foo.txt") == posix(
        "/test/path/more/path/foo.txt"
    )


@pytest.mark.parametrize(
    "base, other",
    [
        ("/foo/bar", "/baz.txt"),
        ("/foo/bar/", "/../x/"),
        ("/", "/a/b"),
        ("/a", "/"),
    ],
)
def test_false_root_equals_stripped_root(base, other):
    b = parser.parse(base, Platform.Posix)
    i = parser.parse(other, Platform.Posix)

    assert join(b, i) == join(b, strip_root(i))


def test_relative_base_absolute_other_replaces(posix):
    assert posix("foo/bar").join("/baz.txt") == posix("/baz.txt")
    assert posix().join("/foo/bar/") == posix("/foo/bar/")


def test_leading_parent_from_directory(posix):
    assert posix("/foo/bar/baz/").join("../pow.txt") == posix("/foo/bar/pow.txt")


def test_leading_parents_from_directory(posix):
    assert posix("/foo/bar/baz/").join("../../pow.txt") == posix("/foo/pow.txt")


def test_leading_parent_skips_file(posix):
    assert posix("/foo/bar/baz.txt").join("../pow.txt") == posix("/foo/pow.txt")


def test_directory_traversal(posix):
    assert posix("/foo1/foo2/foo3/bar.txt").join("../baz/zip.txt") == posix(
        "/foo1/foo2/baz/zip.txt"
    )
    assert posix("/foo1/foo2/foo3/bar.txt").join("../../baz/zip.txt") == posix(
        "/foo1/baz/zip.txt"
    )
    assert posix("/foo1/foo2/foo3/").join("../zip.txt") == posix(
        "/foo1/foo2/zip.txt"
    )


def test_never_above_root(posix):
    assert posix("/a").join("../../x") == posix("/x")
    assert posix("/").join("../x/") == posix("/x/")


def test_above_root_is_logged(posix, caplog):
    with caplog.at_level(logging.DEBUG, logger="os_path.joiner"):
        posix("/a/").join("../../x")

    assert "Discarded 1 parent traversal(s) above root" in caplog.text


def test_relative_keeps_excess_parents(posix):
    assert posix("a/").join("../../x") == posix("../x")
    assert posix("a/b.txt").join("../../x") == posix("../x")
    assert posix("../").join("../x") == posix("../../x")


def test_non_leading_parent_is_not_resolved(posix):
    assert str(posix("/a").join("b/../c")) == "/a/b/../c"


def test_leading_current_dir_is_skipped(posix):
    assert posix("/a/b/").join("./../c") == posix("/a/c")
    assert posix("/a/b/").join("./c") == posix("/a/b/c")


def test_join_nothing_keeps_base(posix):
    base = posix("/a/b.txt")

    assert base.join("") == base
    assert base.join("/") == base
    assert base.join(".") == base


def test_join_takes_directory_flag_from_other(posix):
    assert posix("/a/b").join("c/").is_dir
    assert not posix("/a/b/").join("c").is_dir


def test_join_up_to_root_is_directory(posix):
    path = posix("/a/").join("..")

    assert path == posix("/")
    assert path.is_dir


def test_join_does_not_change_base(posix):
    base = posix("/foo/bar/")
    base.join("../baz")

    assert base == posix("/foo/bar/")


def test_join_many(posix):
    assert posix("/a/").join("b/", "/c/", "../d") == posix("/a/b/d")


def test_truediv(posix):
    assert posix("/foo/bar/baz.txt") / "../pow.txt" == posix("/foo/pow.txt")


def test_push(posix):
    path = posix()
    path.push("/foo/bar")
    path.push("/baz.txt")

    assert str(path) == "/foo/bar/baz.txt"


def test_push_traversal(posix):
    path = posix("/foo/bar")
    path.push("../baz.txt")

    assert str(path) == "/baz.txt"


def test_push_does_not_alias(posix):
    path = posix("/foo/")
    other = path.copy()
    other.push("bar")

    assert path == posix("/foo/")
    assert other == posix("/foo/bar")
