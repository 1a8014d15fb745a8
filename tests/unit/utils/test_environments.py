#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for environment matching."""

import pytest

from codelabmd.utils.environments import match_env


@pytest.mark.unit
class TestMatchEnv:
    """Test conditional inclusion decisions."""

    def test_untagged_node_always_matches(self) -> None:
        """Test an empty tag set is visible in every environment."""
        assert match_env((), "web")
        assert match_env((), None)

    @pytest.mark.parametrize("env", [None, ""])
    def test_unset_env_matches_everything(self, env) -> None:
        """Test an unrestricted render includes tagged nodes."""
        assert match_env(("web",), env)

    def test_member_matches(self) -> None:
        """Test a tag present in the sorted set matches."""
        assert match_env(("cloud", "print", "web"), "print")
        assert match_env(("cloud", "print", "web"), "cloud")
        assert match_env(("cloud", "print", "web"), "web")

    def test_non_member_does_not_match(self) -> None:
        """Test absent tags, including ones sorting between members."""
        tags = ("cloud", "web")
        assert not match_env(tags, "print")
        assert not match_env(tags, "a")
        assert not match_env(tags, "zzz")

    def test_prefix_is_not_a_match(self) -> None:
        """Test matching is exact."""
        assert not match_env(("webinar",), "web")
