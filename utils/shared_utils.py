"""
Shared utility functions for routers and services
"""
import base64


def decode_base64_text(data: str) -> str:
    """
    Decode base64 content returned by the GitHub contents API into text.

    GitHub wraps the payload at 60 characters, so newlines are dropped before
    decoding. The bytes are decoded as UTF-8 as a whole, which keeps
    multi-byte characters intact.

    Args:
        data: Base64 string, possibly containing newlines

    Returns:
        str: Decoded UTF-8 text
    """
    cleaned = data.replace("\n", "").replace("\r", "")
    return base64.b64decode(cleaned).decode("utf-8")


def encode_base64_text(text: str) -> str:
    """Encode text as UTF-8 and return it base64 encoded, ready for a contents API PUT."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")
