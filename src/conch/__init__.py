"""
A compact, VCS-aware shell prompt

``conch`` prints a one- or two-line prompt string for shells that capture a
program's output on every prompt redraw.  It shows:

- The current directory, relative to the root of the current repository or
  abbreviated relative to your home directory
- The current Jujutsu change (with its shortest unique prefix highlighted) or
  Git branch, marked with ``*`` when there are uncommitted changes
- Whether you're in a Nix shell or a direnv-managed directory
- How long the previous command took and its exit status, if nonzero

Output can be styled for direct display in the terminal (the default) or for
use in Bash's or zsh's ``PS1``.
"""

__version__ = "0.1.0"
__license__ = "MIT"
