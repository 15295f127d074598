"""Merkle trees with inclusion proofs."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def calculate_hash(data: str) -> str:
    """Return the hex SHA-256 digest of a string."""
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


@dataclass(eq=False)
class MerkleNode:
    """A node of a Merkle tree; leaves keep their original data."""

    hash: str
    left: MerkleNode | None = None
    right: MerkleNode | None = None
    data: str = ""

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _build_level(nodes: list[MerkleNode]) -> list[MerkleNode]:
    parents = []
    for start in range(0, len(nodes), 2):
        left = nodes[start]
        # An odd node out is paired with itself.
        right = nodes[start + 1] if start + 1 < len(nodes) else left
        parents.append(MerkleNode(calculate_hash(left.hash + right.hash), left, right))
    return parents


def _find_leaf(root: MerkleNode | None, target_hash: str) -> MerkleNode | None:
    if root is None:
        return None
    if root.is_leaf and root.hash == target_hash:
        return root
    return _find_leaf(root.left, target_hash) or _find_leaf(root.right, target_hash)


def _find_parent(root: MerkleNode | None, child: MerkleNode) -> MerkleNode | None:
    if root is None or root.is_leaf:
        return None
    if root.left is child or root.right is child:
        return root
    return _find_parent(root.left, child) or _find_parent(root.right, child)


class MerkleTree:
    """A binary hash tree built over a list of strings."""

    def __init__(self, data_list: Iterable[str]) -> None:
        self.leaf_data: list[str] = list(data_list)
        if not self.leaf_data:
            raise ValueError("cannot build Merkle Tree from empty data list")
        level = [MerkleNode(calculate_hash(item), data=item) for item in self.leaf_data]
        while len(level) > 1:
            level = _build_level(level)
        self.root: MerkleNode = level[0]

    def root_hash(self) -> str:
        """Return the hash at the root of the tree."""
        return self.root.hash

    def generate_proof(self, data: str) -> list[str]:
        """Collect sibling hashes on the path from the leaf holding data to the root."""
        node = _find_leaf(self.root, calculate_hash(data))
        if node is None:
            raise ValueError("data not found in Merkle Tree")
        logger.debug("Generating proof for data: %s, leaf hash: %s", data, node.hash)

        proof: list[str] = []
        current = node
        while current is not self.root:
            parent = _find_parent(self.root, current)
            if parent is None:
                raise ValueError("could not find parent node")
            sibling = parent.right if parent.left is current else parent.left
            if sibling is not None:
                logger.debug("  sibling hash: %s", sibling.hash)
                proof.append(sibling.hash)
            current = parent
            logger.debug("  Moving up to parent hash: %s", parent.hash)
        logger.debug("Generated Merkle Proof: %s", proof)
        return proof

    def verify_proof(self, data: str, proof: Sequence[str], root_hash: str) -> bool:
        """Fold the proof onto the data's hash, always appending the sibling on the right."""
        calculated = calculate_hash(data)
        logger.debug("Verifying proof for data: %s against root: %s", data, root_hash)
        for sibling_hash in proof:
            calculated = calculate_hash(calculated + sibling_hash)
        is_valid = calculated == root_hash
        logger.debug("Final calculated hash: %s, valid: %s", calculated, is_valid)
        return is_valid

    def __str__(self) -> str:
        leaves = " ".join(self.leaf_data)
        return f"MerkleTree{{RootHash: {self.root_hash()}, LeafData: [{leaves}]}}"