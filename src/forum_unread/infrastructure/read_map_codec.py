"""Flat-string codec for the per-user read map.

Format: ``|<topic_id>:<reply_id>|<topic_id>:<reply_id>...``; the empty map
encodes to "". Decoding is lenient: tokens that are not two non-negative
integers (within BIGINT range) separated by ``:`` are dropped.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = "|"
PAIR_SEPARATOR = ":"

# ids are stored as BIGINT
MAX_ID = 2**63 - 1
_MAX_ID_DIGITS = len(str(MAX_ID))


def encode_read_map(entries: Mapping[int, int]) -> str:
    return "".join(
        f"{ENTRY_SEPARATOR}{topic_id}{PAIR_SEPARATOR}{reply_id}"
        for topic_id, reply_id in entries.items()
    )


def _parse_id(raw: str) -> int | None:
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()) or len(raw) > _MAX_ID_DIGITS:
        return None
    value = int(raw)
    return value if value <= MAX_ID else None


def decode_read_map(raw: str | None) -> dict[int, int]:
    entries: dict[int, int] = {}
    if not raw:
        return entries

    for token in raw.split(ENTRY_SEPARATOR):
        if not token:
            continue
        topic_raw, sep, reply_raw = token.partition(PAIR_SEPARATOR)
        topic_id = _parse_id(topic_raw)
        reply_id = _parse_id(reply_raw) if sep else None
        if topic_id is None or reply_id is None:
            logger.debug("Skipping malformed read map token %r", token)
            continue
        entries[topic_id] = reply_id
    return entries
