#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for escaping helpers."""

import pytest

from codelabmd.utils.escape import (
    escape_angle_brackets,
    escape_html,
    escape_url_parens,
    replace_double_curly_brackets,
)


@pytest.mark.unit
class TestEscapeHtml:
    """Test entity escaping with templating brace neutralization."""

    def test_entities(self) -> None:
        """Test the five HTML special characters."""
        assert escape_html("<a href=\"x\">&'</a>") == "&lt;a href=&quot;x&quot;&gt;&amp;&#x27;&lt;/a&gt;"

    def test_double_braces(self) -> None:
        """Test templating delimiters are neutralized."""
        assert escape_html("{{ project }}") == "&#123;&#123; project &#125;&#125;"

    def test_single_braces_untouched(self) -> None:
        """Test lone braces pass through."""
        assert escape_html("{a}") == "{a}"

    def test_empty(self) -> None:
        """Test empty input."""
        assert escape_html("") == ""


@pytest.mark.unit
class TestOtherEscapes:
    """Test the narrower escaping helpers."""

    def test_replace_double_curly_brackets(self) -> None:
        """Test only brace pairs are replaced."""
        assert replace_double_curly_brackets("a {{b}} c") == "a &#123;&#123;b&#125;&#125; c"

    def test_escape_angle_brackets_leaves_markdown(self) -> None:
        """Test that ampersands and quotes are left alone."""
        assert escape_angle_brackets('a < b & "c" > d') == 'a &lt; b & "c" &gt; d'

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://en.wikipedia.org/wiki/Foo_(bar)", "https://en.wikipedia.org/wiki/Foo_%28bar%29"),
            ("https://x.test/(((", "https://x.test/%28%28%28"),
            ("https://x.test/plain", "https://x.test/plain"),
        ],
    )
    def test_escape_url_parens(self, url: str, expected: str) -> None:
        """Test parentheses are percent-encoded."""
        assert escape_url_parens(url) == expected
