# hubkit

hubkit is a small library of helpers for working with git repositories hosted
on GitHub. It uses only the standard library.

## Modules

- **`hubkit.ssh_config`**: `SSHConfigReader(files)` reads `Host` and
  `HostName` lines from OpenSSH client config files and returns a dict that
  maps each host alias to its host name. `%h` and `%%` tokens are expanded
  (`expand_tokens`), and files that cannot be read are skipped.
  `default_config_files()` lists `~/.ssh/config`, `/etc/ssh_config` and
  `/etc/ssh/ssh_config`, in that order.
- **`hubkit.url`**: `URLParser(ssh_config).parse(raw_url)` returns a `GitURL`
  with `scheme`, `host`, `path` and the other URL parts, plus a `username()`
  method. Scp-like addresses such as `git@host:owner/repo.git` become `ssh`
  URLs, and `git+ssh` is treated as `ssh`. For SSH URLs the port is dropped
  and the host is replaced through the SSH config. The one exception is that
  `github.com` is kept when its alias is `ssh.github.com`. Windows paths are
  left alone. `parse_url(raw_url)` does the same with the current user's SSH
  config, which it reads once and caches. Malformed URLs raise `ValueError`.
- **`hubkit.gitutil`**: helpers for reading git's output and settings:
  `output_lines`, `first_line`, `parse_local_branches` (for `git branch --list`),
  `is_builtin_command` (for `git help -a`), `resolve_git_dir` (which makes the
  reported git directory absolute and honours `-C` global flags),
  `select_comment_char` (for `core.commentchar`, including `auto`) and
  `Range(a, b).is_identical()`.
- **`hubkit.cliutil`**: `split_alias_cmd` splits an alias expansion into shell
  words and raises `AliasError` for empty aliases, `!` aliases or unbalanced
  quotes. `is_empty_dir` checks whether a directory has no entries.
  `msg_from_file` reads a message from a file, or from stdin when the name is
  `-`, and converts CRLF line endings to LF.
- **`hubkit.sync`**: `parse_branch_remotes` reads `branch.<name>.remote` lines
  from `git config --get-regexp`. `SyncColors.for_output(colorize)` gives ANSI
  colours, or empty strings when `colorize` is false. `updated_message` and
  `deleted_message` build the branch report lines and show the old SHA
  shortened to seven characters.
- **`hubkit.release_format`**: the `Release` and `ReleaseAsset` dataclasses,
  `Release.state()` (which gives `draft`, `pre-release` or `""`),
  `release_placeholders` and `expand_format`, and `format_release`, which
  renders a release the way `git log --format` renders a commit.
  `DEFAULT_FORMAT` is `"%T%n"`. The placeholders are `%U`, `%uT`, `%uZ`,
  `%uA`, `%S`, `%sC`, `%t`, `%T`, `%b` and `%as`, plus `%cD`/`%cI`/`%ct`/`%cr`
  and `%pD`/`%pI`/`%pt`/`%pr` for the created and published dates. `%n`,
  `%%`, `%xNN`, `%C(...)` colours and the `+`, `-` and space modifiers are
  also understood. Naive datetimes are taken as UTC.
- **`hubkit.release_assets`**: `parse_asset_arg` splits `file#label` arguments.
  `open_asset_files(args)` is a context manager that yields `LocalAsset`
  objects with open binary file handles and closes them all afterwards. Also
  provided are `pluralize`, `join_messages` (which joins with a blank line)
  and `create_retry_hint` for uploads that only partly succeeded.

## Examples

```python
from hubkit.url import URLParser

parser = URLParser({"gh": "github.com"})
url = parser.parse("gh:octokit/go-octokit")
print(url.scheme, url.host, url.path)   # ssh github.com /octokit/go-octokit
```

```python
from hubkit.gitutil import select_comment_char

select_comment_char("hello\n#nice\nworld", "auto")   # ";"
```

```python
from hubkit.release_format import Release, format_release

release = Release(tag_name="v1.0.0", name="First release")
print(format_release(release, "%T: %t%n", colorize=False), end="")   # v1.0.0: First release
```

```python
from hubkit.cliutil import split_alias_cmd

split_alias_cmd("log --pretty=oneline --graph")   # ["log", "--pretty=oneline", "--graph"]
```

## What it does not do

hubkit is a library only. It has no command-line program. It does not run
git itself: the git helpers work on output and settings that you pass in. It
does not talk to the GitHub API, so it cannot create, edit, download or delete
releases or upload assets. It only prepares and formats the data involved.

## Running the tests

```
pip install -e ".[test]"
pytest
```