#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/options/base.py
"""Base classes for renderer options.

Options are frozen dataclasses. Field metadata carries the help text and
choices used by the CLI and by configuration-file validation.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from codelabmd.constants import DEFAULT_ENV, DEFAULT_MAX_DEPTH, FRAMES_PER_NESTING_LEVEL, RESERVED_STACK_FRAMES


def max_depth_limit() -> int:
    """Return the largest max_depth the interpreter recursion limit supports."""
    return max(1, (sys.getrecursionlimit() - RESERVED_STACK_FRAMES) // FRAMES_PER_NESTING_LEVEL)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build options from a mapping, ignoring keys that are not fields.

        Parameters
        ----------
        values : Mapping[str, Any]
            Typically a loaded configuration file section

        Returns
        -------
        Self

        """
        names = {f.name for f in fields(cls) if f.init}
        return cls(**{key: value for key, value in values.items() if key in names})


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options shared by every renderer.

    Parameters
    ----------
    env : str or None, default None
        Target environment. Nodes tagged with other environments are skipped;
        None renders every node.
    max_depth : int, default 100
        Maximum container nesting before the tree is rejected as malformed.

    """

    env: str | None = field(
        default=DEFAULT_ENV,
        metadata={"help": "Target environment; nodes tagged for other environments are omitted"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum nesting depth before the node tree is rejected", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If max_depth is not positive or would outrun the interpreter
            recursion limit.

        """
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        limit = max_depth_limit()
        if self.max_depth > limit:
            raise ValueError(f"max_depth must be at most {limit}, got {self.max_depth}")
