"""
JSON codec for state attribute values.

Every attribute is stored as a DynamoDB string holding the JSON text of the
value, so numbers and booleans survive without DynamoDB's Decimal conversion.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
from typing import Any

from ..exceptions import MalformedRecordError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


class JsonCodec:
    """Stateless encoder/decoder between JSON-compatible values and text."""

    def encode(self, value: Any) -> str:
        """
        Encode a JSON-compatible value.

        Args:
            value: Scalar, list, dict or None

        Returns:
            Compact JSON text

        Raises:
            TypeError: If the value is not JSON-serializable
            ValueError: If the value contains NaN or Infinity
        """
        return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))

    def decode(self, text: str) -> Any:
        """
        Decode text produced by encode.

        Args:
            text: JSON text

        Returns:
            Decoded value

        Raises:
            MalformedRecordError: If the text is not valid encoder output
        """
        if not isinstance(text, str):
            raise MalformedRecordError(f"Expected encoded text, got {type(text).__name__}")
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            raise MalformedRecordError(f"Cannot decode stored value: {e}") from e


CODEC = JsonCodec()
