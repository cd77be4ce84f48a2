import io

import pytest

from hubkit.cliutil import AliasError, is_empty_dir, msg_from_file, split_alias_cmd


def test_split_alias_shell_alias_fails():
    with pytest.raises(AliasError):
        split_alias_cmd("!source ~/.zshrc")


def test_split_alias_words():
    words = split_alias_cmd("log --pretty=oneline --abbrev-commit --graph --decorate")
    assert len(words) == 5
    assert words[0] == "log"
    assert words[-1] == "--decorate"


def test_split_alias_empty_fails():
    with pytest.raises(AliasError):
        split_alias_cmd("")


def test_split_alias_respects_quotes():
    assert split_alias_cmd("commit -m 'two words'") == ["commit", "-m", "two words"]


def test_split_alias_unbalanced_quote_fails():
    with pytest.raises(AliasError):
        split_alias_cmd("commit -m 'oops")


def test_alias_error_is_value_error():
    with pytest.raises(ValueError):
        split_alias_cmd("")


def test_dir_is_not_empty(tmp_path):
    (tmp_path / "gh-utils-test-file").write_text("x")
    assert not is_empty_dir(tmp_path)


def test_dir_with_hidden_file_is_not_empty(tmp_path):
    (tmp_path / ".hidden").write_text("x")
    assert not is_empty_dir(tmp_path)


def test_dir_is_empty(tmp_path):
    assert is_empty_dir(tmp_path)


def test_missing_dir_counts_as_empty(tmp_path):
    assert is_empty_dir(tmp_path / "missing")


def test_msg_from_file_converts_crlf(tmp_path):
    path = tmp_path / "msg.txt"
    path.write_bytes(b"Title\r\n\r\nBody line\r\n")
    assert msg_from_file(str(path)) == "Title\n\nBody line\n"


def test_msg_from_file_keeps_plain_newlines(tmp_path):
    path = tmp_path / "msg.txt"
    path.write_bytes(b"Title\n\nBody")
    assert msg_from_file(str(path)) == "Title\n\nBody"


def test_msg_from_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("From stdin\r\nsecond"))
    assert msg_from_file("-") == "From stdin\nsecond"


def test_msg_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        msg_from_file(str(tmp_path / "nope.txt"))