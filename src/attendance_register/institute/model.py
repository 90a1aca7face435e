from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Institute:
    """The single institute whose attendance this register keeps."""

    name: str
    address: str
