"""Input-layer public API for key decoding and key-combo dispatch."""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, MOUSE_TOKEN, _PENDING_BYTES, is_pointer_event, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "MOUSE_TOKEN",
    "_PENDING_BYTES",
    "is_pointer_event",
    "read_key",
]
