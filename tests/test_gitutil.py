import pytest

from hubkit.gitutil import (
    Range,
    first_line,
    is_builtin_command,
    output_lines,
    parse_local_branches,
    resolve_git_dir,
    select_comment_char,
)


def test_comment_char_unset():
    assert select_comment_char("", None) == "#"


def test_comment_char_configured():
    assert select_comment_char("", ";") == ";"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", "#"),
        ("hello\n#nice\nworld", ";"),
        ("hello\n#nice\n;world", "@"),
    ],
)
def test_comment_char_auto(text, expected):
    assert select_comment_char(text, "auto") == expected


def test_comment_char_auto_exhausted():
    with pytest.raises(ValueError) as info:
        select_comment_char("#\n;\n@\n!\n$\n%\n^\n&\n|\n:", "auto")
    assert str(info.value) == (
        "unable to select a comment character that is not used in the current message"
    )


@pytest.mark.parametrize(
    "output, expected",
    [
        ("", []),
        ("\n", []),
        ("a", ["a"]),
        ("a\nb\n", ["a", "b"]),
        ("a\n\n", ["a", ""]),
    ],
)
def test_output_lines(output, expected):
    assert output_lines(output) == expected


def test_first_line():
    assert first_line("one\ntwo\n") == "one"
    assert first_line("only") == "only"
    assert first_line("") == ""


def test_range_identical_ignores_case():
    assert Range("ABCDEF0", "abcdef0").is_identical() is True
    assert Range("abcdef0", "abcdef1").is_identical() is False


def test_resolve_absolute_git_dir_unchanged():
    assert resolve_git_dir("/repo/.git", ["-C", "other"], "/cwd") == "/repo/.git"


def test_resolve_relative_git_dir():
    assert resolve_git_dir(".git", [], "/home/u/repo") == "/home/u/repo/.git"


def test_resolve_with_relative_chdir():
    assert resolve_git_dir(".git", ["-C", "sub"], "/work") == "/work/sub/.git"


def test_resolve_with_chained_chdir():
    flags = ["-C", "/x", "-c", "a=b", "-C", "y"]
    assert resolve_git_dir(".git", flags, "/work") == "/x/y/.git"


def test_resolve_cleans_path():
    assert resolve_git_dir("../.git", [], "/a/b") == "/a/.git"


def test_resolve_missing_chdir_argument():
    with pytest.raises(ValueError):
        resolve_git_dir(".git", ["-C"], "/work")


def test_parse_local_branches():
    assert parse_local_branches("* main\n  feature/x\n") == ["main", "feature/x"]
    assert parse_local_branches("") == []


def test_is_builtin_command():
    help_output = (
        "usage: git [--version]\n"
        "\n"
        "available git commands\n"
        "  add        commit     merge\n"
        "  push       remote\n"
        "commit-tree mentioned here\n"
    )
    assert is_builtin_command(help_output, "commit") is True
    assert is_builtin_command(help_output, "remote") is True
    assert is_builtin_command(help_output, "commit-tree") is False
    assert is_builtin_command(help_output, "browse") is False