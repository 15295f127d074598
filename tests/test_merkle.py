import pytest

from chainlab.merkle import MerkleTree, calculate_hash

DATA = ["data1", "data2", "data3", "data4", "data5"]


def test_calculate_hash_known_values():
    assert calculate_hash("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert calculate_hash("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_empty_list_raises():
    with pytest.raises(ValueError, match="empty data list"):
        MerkleTree([])


def test_single_leaf_tree():
    tree = MerkleTree(["only"])
    assert tree.root_hash() == calculate_hash("only")
    assert tree.root.data == "only"
    proof = tree.generate_proof("only")
    assert proof == []
    assert tree.verify_proof("only", proof, tree.root_hash()) is True


def test_two_leaf_root_combines_children():
    tree = MerkleTree(["a", "b"])
    assert tree.root_hash() == calculate_hash(calculate_hash("a") + calculate_hash("b"))
    assert tree.root.left.data == "a"
    assert tree.root.right.data == "b"


def test_odd_leaf_is_paired_with_itself():
    tree = MerkleTree(["a", "b", "c"])
    right = tree.root.right
    assert right.left is right.right
    assert right.hash == calculate_hash(calculate_hash("c") + calculate_hash("c"))


def test_leaf_data_kept():
    tree = MerkleTree(DATA)
    assert tree.leaf_data == DATA


def test_proof_for_leftmost_leaf_verifies():
    tree = MerkleTree(DATA)
    proof = tree.generate_proof("data1")
    assert len(proof) == 3
    assert proof[0] == calculate_hash("data2")
    assert tree.verify_proof("data1", proof, tree.root_hash()) is True


def test_proof_for_right_child_does_not_verify():
    # Verification always places the sibling on the right, so paths through right children fail.
    tree = MerkleTree(DATA)
    proof = tree.generate_proof("data3")
    assert proof[0] == calculate_hash("data4")
    assert len(proof) == 3
    assert tree.verify_proof("data3", proof, tree.root_hash()) is False


def test_duplicated_leaf_uses_own_hash_as_sibling():
    tree = MerkleTree(DATA)
    proof = tree.generate_proof("data5")
    assert proof[0] == calculate_hash("data5")


def test_wrong_data_fails_verification():
    tree = MerkleTree(DATA)
    proof = tree.generate_proof("data1")
    assert tree.verify_proof("wrong_data", proof, tree.root_hash()) is False


def test_truncated_proof_fails_verification():
    tree = MerkleTree(DATA)
    proof = tree.generate_proof("data1")
    assert tree.verify_proof("data1", proof[1:], tree.root_hash()) is False


def test_missing_data_raises():
    tree = MerkleTree(DATA)
    with pytest.raises(ValueError, match="data not found"):
        tree.generate_proof("absent")


def test_power_of_two_all_left_path_verifies():
    tree = MerkleTree(["w", "x", "y", "z"])
    proof = tree.generate_proof("w")
    assert len(proof) == 2
    assert tree.verify_proof("w", proof, tree.root_hash()) is True


def test_str_format():
    tree = MerkleTree(["a", "b"])
    assert str(tree) == f"MerkleTree{{RootHash: {tree.root_hash()}, LeafData: [a b]}}"