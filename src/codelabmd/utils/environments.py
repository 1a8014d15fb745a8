#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/utils/environments.py
"""Environment matching for conditional node inclusion."""

from __future__ import annotations

from bisect import bisect_left
from typing import Optional, Sequence


def match_env(tags: Sequence[str], env: Optional[str]) -> bool:
    """Decide whether a node tagged with ``tags`` is visible in ``env``.

    Parameters
    ----------
    tags : sequence of str
        The node's environment tags, sorted ascending
    env : str or None
        The active rendering environment; None or "" means unrestricted

    Returns
    -------
    bool
        True if ``tags`` is empty, ``env`` is unset, or ``env`` is one of ``tags``

    Examples
    --------
    >>> match_env((), "web")
    True
    >>> match_env(("print", "web"), "web")
    True
    >>> match_env(("web",), "print")
    False

    """
    if not tags or not env:
        return True
    i = bisect_left(tags, env)
    return i < len(tags) and tags[i] == env


__all__ = ["match_env"]
