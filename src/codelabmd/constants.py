#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the codelabmd library.

This module centralizes the hardcoded values and default configuration
constants used across the renderers, the CLI and the serializer.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Rendering Defaults - Renderer option defaults
3. Markup Vocabulary - Tag strings shared by the dialects
4. CLI Defaults - Serve/render command defaults
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DialectType = Literal["markdown", "qwiklabs"]
InfoboxKind = Literal["positive", "negative"]
ImportStyle = Literal["inline", "reference"]
OutputFormatType = Literal["md", "html"]

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_DIALECT: DialectType = "markdown"
DEFAULT_ENV: str | None = None
DEFAULT_MAX_DEPTH = 100

# Interpreter frames one level of node nesting occupies while rendering, and
# frames left free for callers and the inline HTML fallback renderer
FRAMES_PER_NESTING_LEVEL = 6
RESERVED_STACK_FRAMES = 200
DEFAULT_LINE_PREFIX = ""
DEFAULT_ORDERED_LIST_START = 1

# Serialized node trees
AST_SCHEMA_VERSION = 1

# =============================================================================
# Markup Vocabulary
# =============================================================================

CONSOLE_BLOCK_OPEN = "<ql-code-block bash templated noWrap>"
CONSOLE_BLOCK_CLOSE = "</ql-code-block>"
CONSOLE_BLOCK_TAG_NAME = "ql-code-block"
SOURCE_CODE_FENCE = "```"

INFOBOX_POSITIVE_TAGS = ("<ql-infobox>", "</ql-infobox>")
INFOBOX_NEGATIVE_TAGS = ("<ql-warningbox>", "</ql-warningbox>")

YOUTUBE_TAG_TEMPLATE = '<ql-video youtubeId="{video_id}"></ql-video>'
YOUTUBE_EMBED_URL = "https://www.youtube.com/embed/{video_id}?rel=0"

BUTTON_TAGS = ("<button>", "</button>")
BULLET_MARKER = "* "
TABLE_HEADER_SEPARATOR_CELL = " --- |"

HINT_CLOSE_TAG = "</ql-hint>"
PROBE_CLOSE_TAG = "</ql-multiple-choice-probe>"

# =============================================================================
# CLI Defaults
# =============================================================================

DEFAULT_SERVE_HOST = "localhost"
DEFAULT_SERVE_PORT = 9090
DEFAULT_SERVE_DIR = "."

CONFIG_FILENAMES = [".codelabmd.toml", ".codelabmd.yaml", ".codelabmd.yml", ".codelabmd.json"]
PYPROJECT_TOOL_SECTION = "codelabmd"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
