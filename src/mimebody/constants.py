#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mimebody library.

This module centralizes the literal strings that make up the produced MIME
document. Every header line, delimiter and separator the renderer writes is
defined here so that the wire format can be read in one place.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Line Discipline - Line endings and separators
3. Boundary Tokens - Reserved delimiters, one per nesting level
4. Header Templates - Fixed header lines for each part kind
5. Configuration - Config file names and environment variables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TextSubtype = Literal["plain", "html"]
BoundaryLevel = Literal["outer", "rfc822", "alternative", "related"]

# =============================================================================
# Line Discipline
# =============================================================================

CRLF = "\r\n"
BLANK_LINE = CRLF + CRLF
DELIMITER_PREFIX = "--"
CLOSE_DELIMITER_SUFFIX = "--"

# =============================================================================
# Boundary Tokens
# =============================================================================

# One fixed token per nesting level. Caller content must never contain them.
DEFAULT_OUTER_BOUNDARY = "foo_bar_baz"
DEFAULT_RFC822_BOUNDARY = "foo_bar"
DEFAULT_ALTERNATIVE_BOUNDARY = "foo"
DEFAULT_RELATED_BOUNDARY = "fizz_buzz"

# Random boundaries are "<prefix>_<level>_<hex>"
RANDOM_BOUNDARY_PREFIX = "mimebody"
RANDOM_BOUNDARY_BYTES = 12

# =============================================================================
# Header Templates
# =============================================================================

MIME_VERSION_HEADER = "MIME-Version: 1.0"
JSON_CONTENT_TYPE_HEADER = 'Content-Type: application/json; charset="UTF-8"'
RFC822_CONTENT_TYPE_HEADER = "Content-Type: message/rfc822"
TEXT_CONTENT_TYPE_TEMPLATE = 'Content-Type: text/{subtype}; charset="UTF-8"'
TEXT_TRANSFER_ENCODING_HEADER = "Content-Transfer-Encoding: 7bit"
BASE64_TRANSFER_ENCODING_HEADER = "Content-Transfer-Encoding: base64"
MULTIPART_CONTENT_TYPE_TEMPLATE = 'Content-Type: multipart/{subtype}; boundary="{boundary}"'

# =============================================================================
# Conversion Behavior
# =============================================================================

DEFAULT_VALIDATE_REQUIRED_FIELDS = True
DEFAULT_CHECK_BOUNDARY_COLLISIONS = False

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_VAR = "MIMEBODY_CONFIG"
CONFIG_FILENAMES = [".mimebody.toml", ".mimebody.yaml", ".mimebody.yml", ".mimebody.json"]
PYPROJECT_TOOL_SECTION = "mimebody"

# Request file extensions understood by the request loader
REQUEST_FILE_EXTENSIONS = (".json", ".yaml", ".yml", ".toml")
