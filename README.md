# chainlab

A small, self-contained blockchain for experimenting with the basic ideas
behind one: SHA-256 block hashes, a proof-of-work search for a nonce, chain
validation that catches tampering, and Merkle trees with inclusion proofs.

It has no dependencies beyond the Python standard library.

## Installing

```
pip install .
```

## The interactive tool

```
chainlab
```

The command creates a chain holding a genesis block, prints the genesis
block's hash and opens a menu:

1. Mine a new block: asks for the block's data and searches for a nonce whose block hash starts with `0000`, then appends the block.
2. View the blockchain: prints every block's number, timestamp, previous hash, transactions, nonce and hash.
3. Tamper with a block: replaces one non-genesis block's data, recomputes its hash, and shows the hash before and after and whether the chain is still valid.
4. Check whether the blockchain is valid.
5. Run a Merkle tree demonstration: builds a tree over `data1` to `data5`, makes a proof for `data3`, and checks it against the right data, wrong data and a proof with its first hash removed.
6. Exit.

The menu also ends when input runs out. `chainlab --help` shows the usage line.

## Using the library

```python
from chainlab.block import Block
from chainlab.blockchain import Blockchain, BlockValidationError, is_chain_valid
from chainlab.merkle import MerkleTree, calculate_hash

chain = Blockchain()                       # starts with a genesis block
last = chain.last_block()
block = Block.create(last.block_number + 1, last.hash, "alice pays bob", nonce=0)
chain.add_block(block)                     # raises BlockValidationError if the block does not fit

assert is_chain_valid(chain.blocks)

tree = MerkleTree(["data1", "data2", "data3", "data4", "data5"])
root = tree.root_hash()
proof = tree.generate_proof("data3")       # raises ValueError for data not in the tree
print(tree.verify_proof("data3", proof, root))
```

- `Block` is a dataclass; `Block.create` stamps it with the current time in
  nanoseconds and fills in its hash, and `calculate_hash` recomputes it.
- `Blockchain` keeps its blocks in `blocks`. `is_block_valid` tells whether a
  block could be appended; `replace_chain` adopts a longer valid chain and
  returns whether it did.
- `MerkleTree` raises `ValueError` when given no data. An odd node at any
  level is paired with itself.

`chainlab.cli` also provides `proof_of_work`, `mine_new_block`,
`tamper_with_block` (returning a `TamperResult`) and `format_blockchain`,
which the menu is built on.

Proof verification always hashes the running value on the left and the
sibling hash on the right, so a proof only verifies for leaves that sit on
the left at every level of the tree. That is the tree's defined behaviour,
not an error in your data.

Progress messages from the chain and the Merkle tree go to the standard
`logging` module (loggers `chainlab.blockchain` and `chainlab.merkle`).

## What it does not do

The chain lives in memory only: nothing is saved between runs. There is no
networking, no peers and no transactions beyond a plain string per block;
the mining difficulty is fixed at a `0000` hash prefix.

## Running the tests

```
pip install .[test]
pytest
```