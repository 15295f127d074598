"""A small blockchain with proof-of-work mining, chain validation, Merkle proofs and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["block", "blockchain", "merkle", "cli"]