"""Blocks and their hashing."""

from __future__ import annotations

import hashlib
import time
from dataclasses import dataclass

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)
_REPLACEMENT = "\ufffd"


def _rune(value: int) -> str:
    """Render an integer as the single character with that code point.

    Values that are not valid Unicode scalar values become U+FFFD.
    """
    if 0 <= value <= _MAX_CODE_POINT and value not in _SURROGATES:
        return chr(value)
    return _REPLACEMENT


@dataclass
class Block:
    """A single block of the chain."""

    block_number: int
    timestamp: int
    prev_block_hash: str
    transactions: str
    nonce: int
    hash: str = ""

    @classmethod
    def create(
        cls, block_number: int, prev_block_hash: str, transactions: str, nonce: int
    ) -> "Block":
        """Build a block stamped with the current time, with its hash filled in."""
        block = cls(
            block_number=block_number,
            timestamp=time.time_ns(),
            prev_block_hash=prev_block_hash,
            transactions=transactions,
            nonce=nonce,
        )
        block.hash = block.calculate_hash()
        return block

    def calculate_hash(self) -> str:
        """Return the hex SHA-256 digest of the block's contents."""
        record = (
            _rune(self.block_number)
            + _rune(self.timestamp)
            + self.prev_block_hash
            + self.transactions
            + _rune(self.nonce)
        )
        return hashlib.sha256(record.encode("utf-8")).hexdigest()