"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing and swallows SGR mouse reports as ``MOUSE``.
"""

from __future__ import annotations

import os
import select

from ..errors import InputClosed

ESC_SEQUENCE_TIMEOUT_MS = 25
MOUSE_TOKEN = "MOUSE"
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\x03": "CTRL_C",
    b"\x04": "CTRL_D",
}

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> bytes:
    """Collect continuation bytes for a multi-byte UTF-8 lead byte."""
    first = lead[0]
    if first >= 0xF0:
        missing = 3
    elif first >= 0xE0:
        missing = 2
    elif first >= 0xC0:
        missing = 1
    else:
        return lead
    out = bytearray(lead)
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        out += nxt
    return bytes(out)


def read_key(fd: int) -> str:
    """Block until one key is available on ``fd`` and return its token.

    Raises ``InputClosed`` when ``fd`` reports end-of-file.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        ch = os.read(fd, 1)
        if not ch:
            raise InputClosed("standard input closed")

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    named = _CSI_FINAL_KEYS.get(seq)
    if named is not None:
        return named
    if seq == b"<":
        # SGR mouse: ESC [ < btn ; col ; row (M/m)
        for _ in range(64):
            part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                return "ESC"
            if part in {b"M", b"m"}:
                return MOUSE_TOKEN
        return "ESC"

    # Drain the rest of an unrecognized CSI sequence up to its final byte.
    while not (b"@" <= seq <= b"~"):
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            break
    return "ESC"


def is_pointer_event(key: str) -> bool:
    return key == MOUSE_TOKEN
