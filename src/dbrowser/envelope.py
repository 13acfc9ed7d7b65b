"""Utilities for reading routing fields of decoded envelopes."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from dbrowser.errors import RoutingError
from dbrowser.types import Envelope, Message

_HEX_ID = re.compile(r"^[0-9a-fA-F]{1,64}$")


def field_of(parsed: Any, key: str, default: Any = None) -> Any:
    """Read a field from mapping-like or attribute-based parse results."""

    if isinstance(parsed, Mapping):
        return parsed.get(key, default)
    return getattr(parsed, key, default)


def envelope_from_parsed(message: Message, parsed: Any) -> Envelope:
    """Build an envelope from a codec parse result carrying ``dst`` and ``src``."""

    dst = field_of(parsed, "dst")
    if not isinstance(dst, str) or not dst:
        raise RoutingError("parsed message has no dst address")
    src = field_of(parsed, "src")
    if not isinstance(src, str) or not src:
        raise RoutingError("parsed message has no src address")
    return Envelope(payload=message, dst=dst, src=src)


def split_address(address: str) -> tuple[int, str]:
    """Split ``<workchain>:<hex id>`` into its workchain and id parts."""

    workchain, sep, account_id = address.strip().partition(":")
    if not sep or not _HEX_ID.match(account_id):
        raise RoutingError(f"malformed address: {address!r}")
    try:
        return int(workchain, 10), account_id
    except ValueError as exc:
        raise RoutingError(f"malformed workchain in address: {address!r}") from exc


def normalize_address(address: str) -> str:
    """Return the canonical raw form of an address, used as session key."""

    workchain, account_id = split_address(address)
    return f"{workchain}:{account_id.lower()}"
