# minigit

Dependency-free building blocks for a small Git-like version control
tool. Every function takes the paths it works on (objects directory,
index file, config file, ignore file) as arguments, so the pieces can be
used on any directory layout.

Requires Python 3.10 or later.

## What is in the package

- `minigit.object_type` – `ObjectType` (`COMMIT`, `BLOB`, `TREE`),
  `ObjectType.add_header(content)` to prefix `<type> <size>\0`, and
  `ObjectType.from_name(name)`.
- `minigit.compressor` – `compress(content)` and `uncompress(readable)`
  (zlib; `readable` may be bytes or a binary file).
- `minigit.hashing` – `GitHash`, a 40-character hex SHA-1 id, with
  `hash_sha1`, `hash_object`, `hash_blob`, `hash_tree`, `hash_commit`,
  `split_at_2`, `to_bytes` and `from_bytes`; and
  `parse_hash_object_args(args)` for `<path> [-t <type>] [-w]`.
- `minigit.git_object` – loose objects stored zlib-compressed under
  `<objects>/<first 2 hex digits>/<remaining 38>`: `save_object`,
  `save_blob`, `save_tree`, `save_commit` (each returns the hash),
  `open_object`, `parse_object`, `parse_object_content`, `object_path`,
  `delete_object`, `read_blob`, and `hash_object_command(args, path_objects)`,
  which hashes a file, stores it when `-w` is given, prints and returns
  the hash.
- `minigit.blob` – `Blob`, with `write_to_working_directory(path)` and
  `get_hash()`.
- `minigit.cat_file` – `cat_file(option, hash_object, directory)` with
  `-p` (content), `-s` (size) or `-t` (type); `directory` defaults to
  `.minigit/objects`.
- `minigit.ignore` – `get_ignored_files(path_ignore)` (one path per line)
  and `check_ignore(args, path_ignore)`, which prints and returns the
  given paths that are ignored.
- `minigit.index_file_info` – `IndexFileInfo`, one index line:
  `path mod_date current_blob_hash previous_blob_hash` (the last one may
  be `None`).
- `minigit.index` – `Index` (open, add, remove, save, status, …),
  `Status` (`untracked`, `not_staged`, `staged`), `add_command`,
  `rm_command`, `list_dir_file_paths` (skips `.gitignore` files and
  `.minigit` directories) and `format_status`, which prints a status
  report and returns a one-line summary.
- `minigit.diff` – `diff(original, modified)` returns a list of
  `LineChange(kind, line)` where `kind` is a `ModificationType`
  (`SAME`, `ADD`, `REMOVE`); built on
  `longest_common_line_subsequence(lines1, lines2)`.
- `minigit.config` – `RepoConfig` holding the user's name and mail, and
  `config_command(path_config, args)` for
  `--user-name <name> --user-mail <mail>` (or `--test`).
- `minigit.log_file` – log line builders (`log_text_initial`,
  `log_text_finish`, `server_log_line`, `user_data`), writers
  (`write_log_lines`, `write_logs_from_queue`, which reads a
  `queue.Queue` until it yields `None`) and `send_info_from_server` /
  `send_info_from_client_http`, which put lines on a queue.
- `minigit.http_request` – `read_full_request`, `read_request_body`,
  `parse_headers`, `parse_query`, `verify_request_validity` (URIs of the
  form `/repos/<repo>/pulls...`) and `parse_json_create_body`
  (returns `(base, head, title)`).
- `minigit.http_response` – `HTTPStatus` and `HTTPResponse`;
  `HTTPResponse.from_result(body, error, method)` picks the status
  (201 for a successful `POST`, 200 otherwise, 400/404/405 for the
  matching HTTP errors, 500 for any other error) and `as_bytes()`
  serialises it.

All errors derive from `minigit.errors.GitError`; command-line mistakes
derive from `CommandError` and HTTP failures from `HTTPError`
(`BadRequest`, `NotFound`, `MethodNotAllowed`).

## Examples

Hashing content:

```python
from minigit.hashing import GitHash

print(GitHash.hash_blob(b""))  # e69de29bb2d1d6434b8b29ae775ad8c2e48c5391
```

Writing an object and reading it back:

```python
from pathlib import Path

from minigit.git_object import read_blob, save_blob

objects = Path("repo/.minigit/objects")
blob_id = save_blob(b"hello\n", objects)
print(read_blob(blob_id, objects).content)
```

Inspecting an object:

```python
from minigit.cat_file import cat_file

print(cat_file("-t", str(blob_id), objects))  # blob
print(cat_file("-s", str(blob_id), objects))  # 6
```

Diffing two texts line by line:

```python
from minigit.diff import diff

for change in diff("line 1\nline 2\nline 3", "line 1\nline 4\nline 3"):
    print(change.kind.name, change.line)
```

Staging files and reading the status (the index file must already exist,
empty or not):

```python
from minigit.index import Index, add_command, format_status

home = Path("repo")
add_command(["notes.txt"], home, home / ".minigit/index", objects)

index = Index.open(home / ".minigit/index")
status = index.status(home, home / ".gitignore")
print(format_status("master", status.untracked, status.not_staged, status.staged))
```

Setting the user identity (the config file must already exist):

```python
from minigit.config import config_command

config_command(
    Path("repo/.minigit/config"),
    ["--user-name", "alice", "--user-mail", "alice@example.com"],
)
```

## What it does not do

The package provides the pieces listed above and nothing more. It has no
command-line program and no function that creates a repository layout.
It does not build trees or commits, has no branches, refs, checkout,
log, merge or rebase, and no remotes, fetch, push or pull. The HTTP
modules parse requests and build responses, but there is no server and
no pull-request storage behind them.