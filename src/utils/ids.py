"""Identifier helpers."""

import base64
import uuid


def new_id(prefix: str) -> str:
    """Generate an opaque identifier such as 'bank-3f2a...'."""
    return f"{prefix}-{uuid.uuid4().hex}"


def encode_shareable_id(account_id: str) -> str:
    """Encode an account id into the id a user hands out to receive transfers."""
    return base64.urlsafe_b64encode(account_id.encode("utf-8")).decode("ascii")


def decode_shareable_id(shareable_id: str) -> str | None:
    """Reverse encode_shareable_id; None if the value is not a valid encoding."""
    try:
        return base64.urlsafe_b64decode(shareable_id.encode("ascii")).decode("utf-8")
    except (ValueError, UnicodeError):
        return None
