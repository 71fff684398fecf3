from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
import os
from pathlib import Path
import subprocess
from .prompt import Part, Segment
from .styles import StyleClass as SC
from .util import lossy

log = logging.getLogger(__name__)

#: Default time limit (in seconds) for each VCS command run while probing
DEFAULT_TIMEOUT = 3.0

#: Number of characters of a Jujutsu change ID to display
CHANGE_ID_LEN = 8

#: Template passed to ``jj log`` to describe the working-copy commit.  It
#: outputs the shortest unique prefix of the change ID, the remainder of the
#: change ID up to `CHANGE_ID_LEN` characters, and whether the commit is
#: discardable (empty and without a description).  Change IDs never contain
#: spaces, so a space is a safe delimiter.
JJ_TEMPLATE = (
    f"change_id.shortest({CHANGE_ID_LEN}).prefix()"
    ' ++ " " ++ '
    f"change_id.shortest({CHANGE_ID_LEN}).rest()"
    ' ++ " " ++ '
    'if(empty, if(description, "dirty", "clean"), "dirty")'
)


class VcsContext(ABC):
    """The state of the version-controlled tree containing a directory"""

    #: The canonical path to the root of the repository's working tree
    root: Path

    #: `True` iff the working tree contains uncommitted changes
    dirty: bool

    @property
    @abstractmethod
    def reference(self) -> str:
        """The plain text used to identify the current branch or change"""
        ...

    @abstractmethod
    def reference_part(self) -> Part: ...

    def display_part(self) -> Part:
        """
        Return the styled segments for displaying the repository reference,
        followed by a ``*`` if the working tree is dirty
        """
        part = self.reference_part()
        if self.dirty:
            part.append(Segment("*", SC.VCS_DIRTY))
        return part


@dataclass(frozen=True)
class GitContext(VcsContext):
    #: The short name of the checked-out branch, or, if ``HEAD`` is detached,
    #: the name of the checked-out tag (if any) or the short form of the
    #: current commit hash
    branch: str

    root: Path
    dirty: bool

    #: `True` iff the repository is in a detached ``HEAD`` state
    detached: bool = False

    @property
    def reference(self) -> str:
        return self.branch

    def reference_part(self) -> Part:
        style = SC.VCS_DETACHED if self.detached else SC.VCS_HEAD
        return [Segment(self.branch, style)]

    @classmethod
    def discover(
        cls, start: Path, timeout: float = DEFAULT_TIMEOUT
    ) -> GitContext | None:
        """
        If ``start`` is inside a Git working tree, return a `GitContext`
        describing it; otherwise, or if Git is not installed, return `None`.
        """
        try:
            toplevel = git("rev-parse", "--show-toplevel", cwd=start, timeout=timeout)
        except FileNotFoundError:
            log.debug("Git is not installed")
            return None
        if not toplevel:
            # Not a repository, or a bare repository/inside a .git directory
            return None
        root = Path(toplevel).resolve()
        branch = git(
            "symbolic-ref", "--short", "--quiet", "HEAD", cwd=start, timeout=timeout
        )
        detached = branch is None
        if branch is None:
            branch = git(
                "describe", "--tags", "--exact-match", "HEAD", cwd=start, timeout=timeout
            ) or git("rev-parse", "--short", "HEAD", cwd=start, timeout=timeout)
            if branch is None:
                log.debug("Could not determine Git HEAD in %s", root)
                return None
        status = git(
            "--no-optional-locks",
            "status",
            "--porcelain",
            "--untracked-files=no",
            cwd=start,
            timeout=timeout,
        )
        if status is None:
            log.debug("Could not get status of Git repository at %s", root)
        return cls(
            branch=lossy(branch), root=root, dirty=bool(status), detached=detached
        )


@dataclass(frozen=True)
class ChangeInfo:
    #: The change ID as displayed by Jujutsu (using the letters ``k``-``z``),
    #: at least `CHANGE_ID_LEN` characters long
    hex: str

    #: The length of the shortest prefix of ``hex`` that uniquely identifies
    #: the change in the repository
    prefix_len: int

    @property
    def prefix(self) -> str:
        return self.hex[: self.prefix_len]

    @property
    def rest(self) -> str:
        return self.hex[self.prefix_len : CHANGE_ID_LEN]


@dataclass(frozen=True)
class JujutsuContext(VcsContext):
    change: ChangeInfo
    root: Path
    dirty: bool

    @property
    def reference(self) -> str:
        return self.change.prefix + self.change.rest

    def reference_part(self) -> Part:
        part = [Segment(self.change.prefix, SC.JJ_PREFIX)]
        if self.change.rest:
            part.append(Segment(self.change.rest, SC.JJ_REST))
        return part

    @classmethod
    def discover(
        cls, start: Path, timeout: float = DEFAULT_TIMEOUT
    ) -> JujutsuContext | None:
        """
        If ``start`` or one of its ancestors contains a ``.jj`` directory,
        query Jujutsu for the state of the workspace's working-copy commit and
        return a `JujutsuContext` describing it.  If there is no workspace, or
        if Jujutsu is not installed or fails, return `None`.

        The working copy is not snapshotted, so changes to files only show up
        after the next ``jj`` command is run.
        """
        root = find_workspace_root(start)
        if root is None:
            return None
        try:
            out = jj(
                "log",
                "--ignore-working-copy",
                "--no-graph",
                "--color",
                "never",
                "--revisions",
                "@",
                "--template",
                JJ_TEMPLATE,
                cwd=root,
                timeout=timeout,
            )
        except FileNotFoundError:
            log.debug("Jujutsu is not installed")
            return None
        if out is None:
            return None
        try:
            change, dirty = parse_jj_output(out)
        except ValueError as e:
            log.debug("Could not parse jj output %r: %s", out, e)
            return None
        return cls(change=change, root=root, dirty=dirty)


def parse_jj_output(out: str) -> tuple[ChangeInfo, bool]:
    """
    Parse the output of ``jj log`` run with `JJ_TEMPLATE` into a `ChangeInfo`
    and a dirtiness flag.  Raises `ValueError` on malformed input.
    """
    # `rest` is empty when the unique prefix is `CHANGE_ID_LEN` or longer
    fields = out.split(" ")
    if len(fields) != 3:
        raise ValueError(f"expected 3 fields, got {len(fields)}")
    prefix, rest, state = fields
    if not prefix:
        raise ValueError("empty change ID prefix")
    if state not in ("clean", "dirty"):
        raise ValueError(f"invalid state {state!r}")
    return ChangeInfo(hex=prefix + rest, prefix_len=len(prefix)), state == "dirty"


def find_workspace_root(start: Path) -> Path | None:
    """
    Return the canonical path to the nearest directory at or above ``start``
    that contains a ``.jj`` directory, or `None` if there is none
    """
    for d in (start, *start.parents):
        try:
            if (d / ".jj").is_dir():
                return d.resolve()
        except OSError as e:
            log.debug("Could not check %s for a Jujutsu workspace: %s", d, e)
    return None


def discover(start: Path, timeout: float = DEFAULT_TIMEOUT) -> VcsContext | None:
    """
    Probe the directory ``start`` for version control, trying Jujutsu first
    (so that colocated repositories are reported as Jujutsu) and then Git.
    Returns `None` if ``start`` is not in a repository that either can read.
    """
    ctx: VcsContext | None = JujutsuContext.discover(start, timeout=timeout)
    if ctx is None:
        ctx = GitContext.discover(start, timeout=timeout)
    return ctx


def git(*args: str, cwd: Path, timeout: float = DEFAULT_TIMEOUT) -> str | None:
    """
    Run a Git command (suppressing stderr) and return its stdout with leading &
    trailing whitespace stripped.  If the command fails or times out, return
    `None`.
    """
    return run(["git", *args], cwd=cwd, timeout=timeout)


def jj(*args: str, cwd: Path, timeout: float = DEFAULT_TIMEOUT) -> str | None:
    """Like `git()`, but for Jujutsu"""
    return run(["jj", *args], cwd=cwd, timeout=timeout)


def run(cmd: list[str], cwd: Path, timeout: float) -> str | None:
    """
    Run ``cmd`` in ``cwd`` and return its stdout, decoded the same way as
    filenames so that paths survive the round trip.  `FileNotFoundError` is
    propagated so that callers can tell when the program is not installed;
    any other failure results in `None`.
    """
    try:
        r = subprocess.run(
            cmd,
            cwd=cwd,
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise
    except subprocess.CalledProcessError as e:
        log.debug("Command %s exited with status %d", cmd, e.returncode)
        return None
    except subprocess.TimeoutExpired:
        log.debug("Command %s timed out after %s seconds", cmd, timeout)
        return None
    except OSError as e:
        log.debug("Could not run command %s: %s", cmd, e)
        return None
    return os.fsdecode(r.stdout).strip()
