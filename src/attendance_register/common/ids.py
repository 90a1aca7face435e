from __future__ import annotations

import secrets
import string

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """Opaque record id: '_' followed by nine base-36 characters."""
    return "_" + "".join(secrets.choice(_ALPHABET) for _ in range(9))
