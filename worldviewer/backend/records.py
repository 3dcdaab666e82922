"""Record-key helpers for the key-value store's flat key collection.

The store itself stays outside this package; callers hand over raw
``(key, value)`` pairs or a JSON dump and get ``{name, size}`` records back.
"""

from __future__ import annotations

import json
import string
from collections.abc import Iterable
from pathlib import Path

from ..errors import BackendFailure

_PRINTABLE_KEY_BYTES = frozenset((string.ascii_letters + string.digits + string.punctuation).encode("ascii"))


def format_record_key(key: bytes) -> str:
    """Show printable ASCII keys as text and everything else as ``0x`` hex."""
    if key and all(byte in _PRINTABLE_KEY_BYTES for byte in key):
        return key.decode("ascii")
    return "0x" + key.hex()


def records_from_pairs(pairs: Iterable[tuple[bytes, bytes | int]]) -> list[dict[str, object]]:
    """Convert ``(key, value)`` pairs into records; ``value`` may be bytes or a size."""
    records: list[dict[str, object]] = []
    for key, value in pairs:
        size = value if isinstance(value, int) else len(value)
        records.append({"name": format_record_key(bytes(key)), "size": size})
    return records


def load_records_file(path: Path) -> list[dict[str, object]]:
    """Load a JSON list of ``{name, size}`` or ``{key_hex, size}`` records."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise BackendFailure(f"Failed to read records file {path}: {exc}") from exc
    if not isinstance(data, list):
        raise BackendFailure(f"Records file {path} must contain a JSON list")

    records: list[dict[str, object]] = []
    for item in data:
        if not isinstance(item, dict):
            raise BackendFailure(f"Records file {path} contains a non-object item: {item!r}")
        size = item.get("size", 0)
        key_hex = item.get("key_hex")
        if isinstance(key_hex, str):
            try:
                name = format_record_key(bytes.fromhex(key_hex))
            except ValueError as exc:
                raise BackendFailure(f"Invalid key_hex {key_hex!r} in {path}") from exc
        else:
            name = item.get("name")
        records.append({"name": name, "size": size})
    return records


__all__ = [
    "format_record_key",
    "records_from_pairs",
    "load_records_file",
]
