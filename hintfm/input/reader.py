"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into key tokens. Handles
ESC-sequence timing, CSI/SS3 navigation keys, and multi-byte UTF-8 input.
Terminals in raw mode only report presses, so every decoded key is a press.
"""

from __future__ import annotations

import os
import select

from . import keys

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": keys.UP,
    b"B": keys.DOWN,
    b"C": keys.RIGHT,
    b"D": keys.LEFT,
    b"H": keys.HOME,
    b"F": keys.END,
    b"Z": keys.BACKTAB,
}
_CSI_TILDE_KEYS: dict[bytes, str] = {
    b"1": keys.HOME,
    b"2": keys.INSERT,
    b"3": keys.DELETE,
    b"4": keys.END,
    b"5": keys.PAGE_UP,
    b"6": keys.PAGE_DOWN,
    b"7": keys.HOME,
    b"8": keys.END,
}
_CONTROL_KEYS: dict[bytes, str] = {
    b"\t": keys.TAB,
    b"\x08": keys.BACKSPACE,
    b"\x7f": keys.BACKSPACE,
    b"\r": keys.ENTER,
    b"\n": keys.ENTER,
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_utf8(fd: int, first: bytes) -> str:
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        if not 0x80 <= nxt[0] <= 0xBF:
            # not a continuation byte: it starts the next key
            _PENDING_BYTES.insert(0, nxt)
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _decode_csi(fd: int) -> str:
    """Decode the remainder of ``ESC [`` sequences."""
    params = b""
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return keys.ESC
        if part in _CSI_FINAL_KEYS and not params:
            return _CSI_FINAL_KEYS[part]
        if part == b"~":
            # Modifiers after ';' do not change which key was pressed.
            return _CSI_TILDE_KEYS.get(params.split(b";")[0], keys.ESC)
        if part in _CSI_FINAL_KEYS:
            return _CSI_FINAL_KEYS[part]
        if not (part.isdigit() or part == b";"):
            return keys.ESC
        params += part
        if len(params) > 16:
            return keys.ESC


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` when ``timeout_ms`` elapses without input or on EOF.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        if ch[0] < 0x20:
            return f"CTRL_{chr(ch[0] + 0x40)}"
        return _decode_utf8(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return keys.ESC
    if seq == b"[":
        return _decode_csi(fd)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return keys.ESC
        return _CSI_FINAL_KEYS.get(final, keys.ESC)
    # Lone ESC followed by an unrelated key: keep that key for the next read.
    _PENDING_BYTES.append(seq)
    return keys.ESC


def read_key_event(fd: int, timeout_ms: int | None = None) -> keys.KeyEvent | None:
    key = read_key(fd, timeout_ms)
    if not key:
        return None
    return keys.KeyEvent(key)


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "read_key", "read_key_event"]
