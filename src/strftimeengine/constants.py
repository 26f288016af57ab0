"""Shared constants for strftimeengine.

This module provides centralized configuration constants used across
the syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Pattern syntax: The escape character that introduces a directive
- Locale: The single fixed locale used for month/weekday names
- Fallback strings: Output for fields a timestamp cannot supply

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern syntax
    "ESCAPE_CHAR",
    # Locale
    "DEFAULT_LOCALE",
    # Fallback strings
    "FALLBACK_TZ_NAME",
    "FALLBACK_TZ_OFFSET",
]

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# Introduces a directive. The character following it selects the renderer.
# A pattern ending in a lone ESCAPE_CHAR fails to compile.
ESCAPE_CHAR: str = "%"

# ============================================================================
# LOCALE
# ============================================================================

# Month names, weekday names and the AM/PM markers are taken from the CLDR
# data of this locale (via Babel). Only this locale is supported.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Naive timestamps carry no zone: %Z and %z render these, matching
# datetime.strftime() on a naive datetime.
FALLBACK_TZ_NAME: str = ""
FALLBACK_TZ_OFFSET: str = ""
