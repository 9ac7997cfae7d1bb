"""
Utility functions for statestore operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
import sys
from collections.abc import Sequence
from typing import Any

from .constants import KEY_ESCAPE, KEY_SEPARATOR


def _escape_component(component: str) -> str:
    return component.replace(KEY_ESCAPE, KEY_ESCAPE * 2).replace(
        KEY_SEPARATOR, KEY_ESCAPE + KEY_SEPARATOR
    )


def build_key(state_id: str, namespace: Sequence[str] = ()) -> str:
    """
    Build the storage key for a state id within a namespace.

    Namespace components come first, then the id, joined by ':'. Separators
    and escapes inside components are backslash-escaped so that different
    (id, namespace) pairs always yield different keys.

    Args:
        state_id: State identifier
        namespace: Namespace components (e.g., ['user', 'profile'])

    Returns:
        Storage key (e.g., 'user:profile:abc123')
    """
    if isinstance(namespace, str):
        raise TypeError("Namespace must be a sequence of strings, not a string")
    return KEY_SEPARATOR.join(_escape_component(part) for part in [*namespace, state_id])


def output_json(data: Any, quiet: bool = False) -> None:
    """
    Output JSON to stdout.

    Args:
        data: Data to output as JSON
        quiet: If True, suppress output
    """
    if not quiet:
        print(json.dumps(data))


def output_text(message: str, quiet: bool = False) -> None:
    """
    Output text to stdout.

    Args:
        message: Message to output
        quiet: If True, suppress output
    """
    if not quiet:
        print(message)


def error_json(error: str, solution: str, exit_code: int) -> dict[str, Any]:
    """
    Format error as JSON.

    Args:
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code

    Returns:
        Error dictionary
    """
    return {"error": error, "solution": solution, "exit_code": exit_code}


def error_text(error: str, solution: str) -> str:
    """
    Format error as human-readable text.

    Args:
        error: Error message
        solution: Solution suggestion

    Returns:
        Formatted error message
    """
    return f"❌ Error: {error}\n\n💡 Solution: {solution}"


def output_error(error: str, solution: str, exit_code: int, text_format: bool = False) -> None:
    """
    Output error message to stderr. The caller decides how to exit.

    Args:
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code reported in the JSON payload
        text_format: If True, output as text; otherwise JSON
    """
    if text_format:
        sys.stderr.write(error_text(error, solution) + "\n")
    else:
        sys.stderr.write(json.dumps(error_json(error, solution, exit_code)) + "\n")


def validate_table_name(table_name: str) -> bool:
    """
    Validate DynamoDB table name.

    Args:
        table_name: Table name to validate

    Returns:
        True if valid

    Raises:
        ValueError: If table name is invalid
    """
    if not table_name:
        raise ValueError("Table name cannot be empty")
    if len(table_name) < 3 or len(table_name) > 255:
        raise ValueError("Table name must be between 3 and 255 characters")
    if not all(c.isalnum() or c in "-_." for c in table_name):
        raise ValueError(
            "Table name can only contain alphanumeric characters, hyphens, underscores, and periods"
        )
    return True


def validate_field_name(field_name: str) -> bool:
    """
    Validate an attribute name used for a reserved field.

    Args:
        field_name: Attribute name to validate

    Returns:
        True if valid

    Raises:
        ValueError: If attribute name is invalid
    """
    if not field_name:
        raise ValueError("Field name cannot be empty")
    if len(field_name) > 255:
        raise ValueError("Field name cannot exceed 255 characters")
    return True
