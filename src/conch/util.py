from __future__ import annotations
import os
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .vcs import VcsContext


def lossy(s: str) -> str:
    """
    Replace any undecodable bytes (represented by surrogate escapes, as in
    `os.fsdecode()` output) in ``s`` with U+FFFD so that it can be printed
    """
    return os.fsencode(s).decode("utf-8", "replace")


def is_text(s: str) -> bool:
    """Return `True` iff ``s`` contains no surrogate escapes"""
    try:
        s.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def abbreviate_path(path: PurePath) -> str:
    """
    Shorten every component of ``path`` but the last to its first character,
    e.g., ``a/bb/ccc/dddd`` becomes ``a/b/c/dddd``.  Components that are not
    valid text are left out.  Paths with fewer than two components are
    returned as-is.
    """
    parts = path.parts
    if not parts:
        return ""
    elif len(parts) == 1:
        return lossy(parts[0])
    initials = [p[0] for p in parts[:-1] if p and is_text(p)]
    s = "/".join([*initials, lossy(parts[-1])])
    # The root component of an absolute path is itself a "/"
    if s.startswith("//"):
        s = s[1:]
    return s


def format_path(
    cwd: Path, repo: VcsContext | None = None, home: Path | None = None
) -> str:
    """
    Return the text to display for the current working directory ``cwd``.

    If ``cwd`` is inside the repository ``repo``, the path is shown relative
    to the repository root's parent (i.e., starting with the root's name).
    Otherwise, if ``cwd`` is at or under ``home``, the path starts with ``~``
    and its intermediate components are abbreviated.  Failing both, the
    absolute path is shown unaltered.
    """
    if repo is not None and repo.root.name:
        try:
            rel = cwd.relative_to(repo.root)
        except ValueError:
            pass
        else:
            if rel.parts:
                return lossy(f"{repo.root.name}/{rel}")
            else:
                return lossy(repo.root.name)
    if home is not None:
        if cwd == home:
            return "~"
        try:
            rel = cwd.relative_to(home)
        except ValueError:
            pass
        else:
            return f"~/{abbreviate_path(rel)}"
    return lossy(str(cwd))


def format_duration(ms: int) -> str | None:
    """
    Format a command duration given in milliseconds for display.  Durations
    under 100ms are not worth showing, and `None` is returned for them.
    """
    if ms < 100:
        return None
    elif ms < 1000:
        return f"{ms}ms"
    elif ms < 60_000:
        return f"{ms / 1000:.1f}s"
    elif ms < 3_600_000:
        secs = ms // 1000
        return f"{secs // 60}m{secs % 60}s"
    else:
        secs = ms // 1000
        return f"{secs // 3600}h{secs % 3600 // 60}m"
