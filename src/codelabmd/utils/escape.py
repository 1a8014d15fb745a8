#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codelabmd/utils/escape.py
"""Escaping helpers for the rendered markup.

The publishing environment runs a double-brace templating pass over the
rendered files, so any ``{{`` or ``}}`` that reaches it from user content
must be neutralized as HTML entities.

"""

from __future__ import annotations

import html

_DOUBLE_CURLY_ENTITIES = {
    "{{": "&#123;&#123;",
    "}}": "&#125;&#125;",
}

_URL_PAREN_ESCAPES = {
    "(": "%28",
    ")": "%29",
}


def replace_double_curly_brackets(text: str) -> str:
    """Replace ``{{`` and ``}}`` with their HTML entity equivalents.

    Parameters
    ----------
    text : str

    Returns
    -------
    str

    Examples
    --------
        >>> replace_double_curly_brackets("{{ project_id }}")
        '&#123;&#123; project_id &#125;&#125;'

    """
    for sequence, entity in _DOUBLE_CURLY_ENTITIES.items():
        text = text.replace(sequence, entity)
    return text


def escape_html(text: str) -> str:
    """HTML-escape text and neutralize templating braces.

    Escapes ``&``, ``<``, ``>``, ``"`` and ``'``.

    Parameters
    ----------
    text : str

    Returns
    -------
    str
        Text safe for element content and quoted attribute values

    """
    if not text:
        return text
    return replace_double_curly_brackets(html.escape(text, quote=True))


def escape_angle_brackets(text: str) -> str:
    """Escape only ``<`` and ``>`` so that markdown syntax is left intact.

    Parameters
    ----------
    text : str

    Returns
    -------
    str

    Examples
    --------
        >>> escape_angle_brackets("a <b> c")
        'a &lt;b&gt; c'

    """
    return text.replace("<", "&lt;").replace(">", "&gt;")


def escape_url_parens(url: str) -> str:
    """Percent-encode parentheses so a URL can sit inside ``](...)``.

    Parameters
    ----------
    url : str

    Returns
    -------
    str

    Examples
    --------
        >>> escape_url_parens("https://en.wikipedia.org/wiki/Foo_(bar)")
        'https://en.wikipedia.org/wiki/Foo_%28bar%29'

    """
    for char, encoded in _URL_PAREN_ESCAPES.items():
        url = url.replace(char, encoded)
    return url


__all__ = [
    "escape_angle_brackets",
    "escape_html",
    "escape_url_parens",
    "replace_double_curly_brackets",
]
