"""
Decoding of the tool result envelope.

A successful tool call carries its actual result as JSON text inside a
content array:

    {
        "content": [
            {"type": "text", "text": "{\"items\": [1, 2, 3]}"}
        ]
    }

decode_payload() extracts and parses content[0].text. Every way the envelope
can be malformed raises PayloadError so the validator can report it as a
failed test instead of crashing.
"""

import json
from typing import Any, Mapping


class PayloadError(ValueError):
    """Raised when a response envelope cannot be decoded."""


def decode_payload(data: Any) -> Any:
    """
    Parse the JSON document embedded in a response envelope.

    Args:
        data: The response's data field

    Returns:
        The parsed JSON value

    Raises:
        PayloadError: If the envelope shape is wrong or the text is not JSON
    """
    if not isinstance(data, Mapping):
        raise PayloadError(f"expected an object envelope, got {type(data).__name__}")

    content = data.get("content")
    if not isinstance(content, list):
        raise PayloadError("envelope has no content array")
    if not content:
        raise PayloadError("content array is empty")

    first = content[0]
    text = first.get("text") if isinstance(first, Mapping) else None
    if not isinstance(text, str):
        raise PayloadError("content[0] has no text field")

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise PayloadError(f"content[0].text is not valid JSON: {e.msg} at position {e.pos}") from e
