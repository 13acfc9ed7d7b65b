"""Signing credentials handed to debots that request them."""

from __future__ import annotations

import asyncio
import json
import re
from dataclasses import dataclass, field
from pathlib import Path

from dbrowser.errors import CredentialError
from dbrowser.terminal import Terminal

KEYS_PROMPT = "Enter path to keys file"
_KEY_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")


@dataclass(frozen=True)
class KeyPair:
    """Opaque signing handle: an ed25519 key pair in hex."""

    public: str
    secret: str = field(repr=False)


def load_keys(path: Path) -> KeyPair:
    try:
        raw = json.loads(path.expanduser().read_text(encoding="utf-8"))
    except OSError as exc:
        raise CredentialError(f"failed to read keys file {path}: {exc.strerror or exc!s}") from exc
    except ValueError as exc:
        raise CredentialError(f"keys file {path} is not valid JSON") from exc
    if not isinstance(raw, dict):
        raise CredentialError(f"keys file {path} must contain a JSON object")

    public = raw.get("public")
    secret = raw.get("secret")
    for name, value in (("public", public), ("secret", secret)):
        if not isinstance(value, str) or not _KEY_PATTERN.match(value):
            raise CredentialError(f"keys file {path} has invalid {name} key")
    return KeyPair(public=public.lower(), secret=secret.lower())


class KeyFileCredentialProvider:
    """Read a key pair from a configured file, asking the operator for the path otherwise."""

    def __init__(self, terminal: Terminal, keys_path: Path | None = None) -> None:
        self._terminal = terminal
        self._keys_path = keys_path

    async def acquire(self) -> KeyPair:
        path = self._keys_path
        if path is None:
            path = Path(await asyncio.to_thread(self._terminal.input, KEYS_PROMPT))
        return load_keys(path)
