"""Glob pattern matching helper."""

import fnmatch
from pathlib import PurePosixPath


def matches_glob(patterns: list[str], rel_path: PurePosixPath) -> bool:
    """Check if a root-relative path matches any of the glob patterns.

    A leading ``**/`` also matches at the root, so ``**/dist/**`` excludes ``dist/a.md``.
    """
    path_str = rel_path.as_posix()
    name = rel_path.name
    for pattern in patterns:
        if not pattern:
            continue
        if fnmatch.fnmatchcase(path_str, pattern) or fnmatch.fnmatchcase(name, pattern):
            return True
        if pattern.startswith("**/") and fnmatch.fnmatchcase(path_str, pattern[3:]):
            return True
    return False
