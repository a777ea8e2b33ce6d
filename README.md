# kiwistorage

Small filesystem helpers for managing the on-disk directories of a storage
engine. Everything lives in the `kiwistorage.util` module and uses only the
standard library.

## Installation

```
pip install kiwistorage
```

For running the tests:

```
pip install "kiwistorage[test]"
pytest
```

## Usage

```python
from kiwistorage.util import is_dir, mkdir_with_path, delete_dir, unique_test_db_path

mkdir_with_path("data/db/0", 0o755)   # create the whole path, then set its mode
assert is_dir("data/db/0")

delete_dir("data")                    # remove the directory and everything in it

path = unique_test_db_path()          # a fresh, not yet existing path
```

## Functions

- `is_dir(path)` returns whether `path` is a directory, following symbolic
  links. It raises `OSError` (for example `FileNotFoundError`) when the path
  cannot be examined, rather than returning `False`.
- `mkdir_with_path(path, mode)` creates `path` and any missing parents; an
  existing directory is not an error. On POSIX systems it then applies `mode`
  to the final directory with `chmod`, whether or not it already existed. On
  other systems the mode is ignored.
- `delete_dir(dirname)` removes a directory tree: files are unlinked,
  subdirectories are removed recursively, and finally `dirname` itself is
  removed. It raises `OSError` if `dirname` does not exist or something in it
  cannot be removed.
- `unique_test_db_path()` returns a `pathlib.Path` named `kiwi-test-db`
  inside a freshly created temporary directory. That temporary directory is
  removed again before the function returns, so neither the returned path nor
  its parent exists; create it (for example with `mkdir_with_path`) before
  use. Each call yields a different path.

## What this package does not do

It provides only the directory helpers above. It contains no storage engine,
no database, no key-value operations, no server and no command-line program.