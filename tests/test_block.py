import pytest

from chainlab.block import Block


def test_create_sets_hash_to_calculated_hash():
    block = Block.create(1, "prev", "payload", 7)
    assert block.hash == block.calculate_hash()
    assert block.block_number == 1
    assert block.prev_block_hash == "prev"
    assert block.transactions == "payload"
    assert block.nonce == 7


def test_hash_is_64_hex_characters():
    digest = Block(3, 10, "p", "t", 1).calculate_hash()
    assert len(digest) == 64
    assert set(digest) <= set("0123456789abcdef")


def test_hash_depends_on_transactions():
    a = Block(1, 10, "p", "one", 0).calculate_hash()
    b = Block(1, 10, "p", "two", 0).calculate_hash()
    assert a != b


def test_hash_depends_on_prev_hash():
    a = Block(1, 10, "aaaa", "t", 0).calculate_hash()
    b = Block(1, 10, "bbbb", "t", 0).calculate_hash()
    assert a != b


def test_hash_depends_on_small_nonce():
    hashes = {Block(1, 10, "p", "t", n).calculate_hash() for n in range(50)}
    assert len(hashes) == 50


def test_small_timestamps_change_hash():
    assert Block(1, 65, "p", "t", 0).calculate_hash() != Block(1, 66, "p", "t", 0).calculate_hash()


def test_realistic_timestamps_do_not_change_hash():
    first = Block(1, 1_700_000_000_000_000_000, "p", "t", 0)
    second = Block(1, 1_800_000_000_000_000_000, "p", "t", 0)
    assert first.calculate_hash() == second.calculate_hash()


@pytest.mark.parametrize("nonce_a,nonce_b", [(0x110000, 0x200000), (0xD800, -1), (0xDFFF, 0x110000)])
def test_invalid_code_point_nonces_collide(nonce_a, nonce_b):
    a = Block(2, 5, "p", "t", nonce_a).calculate_hash()
    b = Block(2, 5, "p", "t", nonce_b).calculate_hash()
    assert a == b


def test_fields_concatenate_without_separators():
    # Block number 65 renders as "A", so it can be shifted into the previous hash.
    a = Block(65, 0x110000, "", "xyz", 0).calculate_hash()
    b = Block(0x110000, 0x110000, "A", "xyz", 0).calculate_hash()
    c = Block(0x110000, 0x110000, "", "xyz", 0).calculate_hash()
    assert a != c
    # "A" + U+FFFD + "" vs U+FFFD + U+FFFD + "A": different ordering, different hash
    assert a != b


def test_create_stamps_current_time():
    before = Block.create(0, "", "x", 0).timestamp
    after = Block.create(0, "", "x", 0).timestamp
    assert after >= before > 0