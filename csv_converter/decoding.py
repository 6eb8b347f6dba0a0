"""Decoding of uploaded bytes into text for the tokenizer."""

from __future__ import annotations

import logging
from typing import Any, Dict

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

_UTF8_BOM = b"\xef\xbb\xbf"


def decode_upload(raw: bytes) -> tuple[str, Dict[str, Any]]:
    """
    Decode uploaded bytes into text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is dropped rather than becoming part of the first header.
    - If decode fails, fall back to UTF-8, then to replacement characters, and report it.
    - Line breaks are left untouched; the tokenizer handles CRLF, LF and CR.
    """
    detected = None

    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(_UTF8_BOM) and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        try:
            text = raw.decode("utf-8-sig")
            decode_used = "utf-8-sig"
            decode_fallback = True
        except UnicodeDecodeError:
            # Last resort: decode with replacement so the conversion can still run
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"
            decode_fallback = True

    if text.startswith("\ufeff"):
        text = text[1:]

    if decode_fallback:
        logger.warning("decoding fell back to %s (detected %s)", decode_used, detected)

    report = {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
        "size_bytes": len(raw),
    }
    return text, report
