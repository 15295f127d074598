"""Interactive command-line front end for the toy blockchain."""

from __future__ import annotations

import argparse
import itertools
import time
from collections.abc import Sequence
from dataclasses import dataclass

from .block import Block
from .blockchain import Blockchain, BlockValidationError, is_chain_valid
from .merkle import MerkleTree

TARGET_PREFIX = "0000"
_THROTTLE_EVERY = 100_000
_THROTTLE_PAUSE = 0.01

_MENU = """
Choose an action:
1: Mine a new block
2: View Blockchain
3: Tamper with a block
4: Check Blockchain Validity
5: Check Merkel tree
6: Exit"""

_DEMO_DATA = ["data1", "data2", "data3", "data4", "data5"]


@dataclass(frozen=True)
class TamperResult:
    """What changed when a block's data was overwritten."""

    block_number: int
    original_hash: str
    new_hash: str
    chain_valid: bool


def _show(value: object) -> str:
    """Render booleans as lower-case words and sequences as bracketed, space-separated items."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_show(item) for item in value) + "]"
    return str(value)


def proof_of_work(last_block: Block, data: str) -> int:
    """Find the first nonce whose candidate block hash starts with the target prefix."""
    print("Mining started...")
    start = time.perf_counter()
    for nonce in itertools.count():
        candidate = Block.create(last_block.block_number + 1, last_block.hash, data, nonce)
        if candidate.hash.startswith(TARGET_PREFIX):
            elapsed = time.perf_counter() - start
            print(f"Mining finished in {elapsed:.6f}s. Hash: {candidate.hash}, Nonce: {nonce}")
            return nonce
        # Ease off the CPU now and then.
        if (nonce + 1) % _THROTTLE_EVERY == 0:
            time.sleep(_THROTTLE_PAUSE)
    raise AssertionError("unreachable")


def mine_new_block(blockchain: Blockchain, data: str) -> Block:
    """Mine a block holding data, append it to the chain and return it."""
    last = blockchain.last_block()
    if last is None:
        raise BlockValidationError("blockchain has no blocks to build on")
    nonce = proof_of_work(last, data)
    block = Block.create(last.block_number + 1, last.hash, data, nonce)
    blockchain.add_block(block)
    return block


def tamper_with_block(blockchain: Blockchain, block_number: int, new_data: str) -> TamperResult:
    """Overwrite a non-genesis block's data and recompute its hash."""
    if len(blockchain.blocks) <= 1:
        raise ValueError("Not enough blocks to tamper with (need at least Block 1).")
    if not 0 < block_number < len(blockchain.blocks):
        raise ValueError("Invalid block number.")
    block = blockchain.blocks[block_number]
    original_hash = block.hash
    block.transactions = new_data
    block.hash = block.calculate_hash()
    return TamperResult(
        block_number=block_number,
        original_hash=original_hash,
        new_hash=block.hash,
        chain_valid=is_chain_valid(blockchain.blocks),
    )


def format_blockchain(blockchain: Blockchain) -> str:
    """Render every block of the chain as readable text."""
    lines = ["", "----- Blockchain -----"]
    for block in blockchain.blocks:
        lines += [
            f"Block Number: {block.block_number}",
            f"Timestamp: {block.timestamp}",
            f"Previous Block Hash: {block.prev_block_hash}",
            f"Transactions: {block.transactions}",
            f"Nonce: {block.nonce}",
            f"Block Hash: {block.hash}",
            "-----------------------",
        ]
    return "\n".join(lines)


def _read(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def _mine_interactive(blockchain: Blockchain) -> None:
    data = _read("Enter block data: ")
    print("\nMining new block...")
    try:
        block = mine_new_block(blockchain, data)
    except BlockValidationError as exc:
        print("Error adding block:", exc)
    else:
        print("Block mined and added to blockchain. Hash:", block.hash)


def _tamper_interactive(blockchain: Blockchain) -> None:
    if len(blockchain.blocks) <= 1:
        print("Not enough blocks to tamper with (need at least Block 1).")
        return
    raw = _read("Enter block number to tamper with (starting from 1): ")
    try:
        number = int(raw)
    except ValueError:
        print("Invalid block number.")
        return
    if not 0 < number < len(blockchain.blocks):
        print("Invalid block number.")
        return
    new_data = _read("Enter new data for block: ")
    result = tamper_with_block(blockchain, number, new_data)
    print(f"\n--- Tampering with Block {number} ---")
    print(f"Block {number} Hash before tampering: {result.original_hash}")
    print(f"Block {number} Hash after tampering: {result.new_hash}")
    print("Blockchain validity after tampering:", _show(result.chain_valid))


def _check_validity(blockchain: Blockchain) -> None:
    valid = is_chain_valid(blockchain.blocks)
    print("\nIs Blockchain valid?", _show(valid))
    if not valid:
        print("Blockchain is INVALID! Tampering detected.")


def _merkle_demo() -> None:
    print("\n--- Merkle Tree Test ---")
    print("Data list for Merkle Tree:", _show(_DEMO_DATA))
    tree = MerkleTree(_DEMO_DATA)
    print("Merkle Tree created:", tree)
    root = tree.root_hash()
    print("Merkle Root:", root)

    target = "data3"
    proof = tree.generate_proof(target)
    print("Merkle Proof for", target, ":", _show(proof))
    print("Is Merkle Proof valid for", target, "?", _show(tree.verify_proof(target, proof, root)))

    wrong = "wrong_data"
    print(
        "Is Merkle Proof valid for", wrong, "(incorrect data)?",
        _show(tree.verify_proof(wrong, proof, root)),
    )
    if proof:
        print(
            "Is Merkle Proof valid with tampered proof?",
            _show(tree.verify_proof(target, proof[1:], root)),
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu until the user exits or input ends."""
    parser = argparse.ArgumentParser(prog="chainlab", description="Explore a toy blockchain.")
    parser.parse_args(argv)

    blockchain = Blockchain()
    print("Genesis block created:", blockchain.blocks[0].hash)

    actions = {
        1: lambda: _mine_interactive(blockchain),
        2: lambda: print(format_blockchain(blockchain)),
        3: lambda: _tamper_interactive(blockchain),
        4: lambda: _check_validity(blockchain),
        5: _merkle_demo,
    }
    while True:
        print(_MENU)
        try:
            raw = input("Enter your choice (1-6): ").strip()
        except EOFError:
            print("\nExiting program.")
            return 0
        try:
            choice = int(raw)
        except ValueError:
            print("Invalid input. Please enter a number between 1 and 6.")
            continue
        if choice == 6:
            print("Exiting program.")
            return 0
        action = actions.get(choice)
        if action is None:
            print("Invalid choice. Please enter a number between 1 and 6.")
            continue
        action()


if __name__ == "__main__":
    raise SystemExit(main())