"""A chain of blocks with validation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .block import Block

logger = logging.getLogger(__name__)

GENESIS_TRANSACTIONS = "Genesis Block Transactions"


class BlockValidationError(ValueError):
    """Raised when a block cannot be appended to the chain."""


def _create_genesis_block() -> Block:
    genesis = Block.create(0, "", GENESIS_TRANSACTIONS, 0)
    logger.info("Genesis block created: %s", genesis.hash)
    return genesis


def _links_to(block: Block, previous: Block) -> bool:
    return (
        block.block_number == previous.block_number + 1
        and block.prev_block_hash == previous.hash
        and block.calculate_hash() == block.hash
    )


def is_chain_valid(chain: Sequence[Block]) -> bool:
    """Check that every block links to the one before it and hashes correctly."""
    if not chain:
        return True
    genesis = chain[0]
    if (
        genesis.block_number != 0
        or genesis.prev_block_hash != ""
        or genesis.calculate_hash() != genesis.hash
    ):
        return False
    return all(_links_to(current, previous) for previous, current in zip(chain, chain[1:]))


class Blockchain:
    """An ordered list of blocks, started with a genesis block."""

    def __init__(self) -> None:
        self.blocks: list[Block] = [_create_genesis_block()]

    def last_block(self) -> Block | None:
        """Return the newest block, or None if the chain is empty."""
        return self.blocks[-1] if self.blocks else None

    def add_block(self, block: Block) -> None:
        """Append a block after checking that it follows the last one."""
        last = self.last_block()
        if last is None:
            raise BlockValidationError("blockchain has no blocks to build on")
        if block.block_number != last.block_number + 1:
            raise BlockValidationError(
                f"invalid block number. Expected: {last.block_number + 1}, "
                f"got: {block.block_number}"
            )
        if block.prev_block_hash != last.hash:
            raise BlockValidationError(
                f"invalid previous block hash. Expected: {last.hash}, "
                f"got: {block.prev_block_hash}"
            )
        if block.calculate_hash() != block.hash:
            raise BlockValidationError(
                "invalid block hash. Calculated hash doesn't match block's hash."
            )
        self.blocks.append(block)

    def is_block_valid(self, block: Block) -> bool:
        """Tell whether the block could be appended to the chain."""
        last = self.last_block()
        return last is not None and _links_to(block, last)

    def replace_chain(self, new_blocks: Sequence[Block]) -> bool:
        """Adopt new_blocks if it is longer and valid; return whether it was adopted."""
        if len(new_blocks) > len(self.blocks) and is_chain_valid(new_blocks):
            logger.info("Replacing current chain with a longer valid chain.")
            self.blocks = list(new_blocks)
            return True
        logger.info("Received chain is not longer or invalid. Ignoring.")
        return False