"""Sample values for dynamic path segments."""

import re

from src.config.constants import (
    ID_PLACEHOLDERS,
    SAMPLE_DEFAULT,
    SAMPLE_ID,
    SAMPLE_UUID,
    UUID_PLACEHOLDER,
)

# Balanced, non-empty, non-nested "{name}" tokens
_PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


def _sample_value(match: re.Match[str]) -> str:
    token = match.group(1)
    if token in ID_PLACEHOLDERS:
        return SAMPLE_ID
    if token == UUID_PLACEHOLDER:
        return SAMPLE_UUID
    return SAMPLE_DEFAULT


def substitute_parameters(path: str) -> str:
    """
    Replace each "{name}" placeholder with a requestable sample value.

    Example: /api/users/{id} -> /api/users/1

    Unbalanced braces and empty "{}" are left untouched.
    """
    return _PLACEHOLDER_PATTERN.sub(_sample_value, path)
