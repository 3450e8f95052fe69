import random

import pytest

from algorithms.bst_ops import bst_delete, bst_insert, bst_search, bst_traverse
from algorithms.step import StepKind
from structures import BinarySearchTree


@pytest.fixture
def tree():
    t = BinarySearchTree()
    t.load_sample()
    return t


def _values(tree, steps):
    return [tree.value_of(n) for n in steps[-1].visited]


@pytest.mark.parametrize("order, expected", [
    ("inorder",    [10, 15, 20, 25, 30, 35, 40]),
    ("preorder",   [25, 15, 10, 20, 35, 30, 40]),
    ("postorder",  [10, 20, 15, 30, 40, 35, 25]),
    ("levelorder", [25, 15, 35, 10, 20, 30, 40]),
])
def test_traversal_orders(tree, order, expected):
    steps = list(bst_traverse(tree, order))
    assert _values(tree, steps) == expected
    assert steps[-1].is_final
    assert steps[-1].output.endswith(" → ".join(str(v) for v in expected))


def test_inorder_narrates_its_own_stack(tree):
    steps = list(bst_traverse(tree, "inorder"))
    assert steps[0].description == "🌳 Starting In-order traversal (Stack-based)"
    assert steps[1].description == "📚 Push 25 to stack, go left"
    assert max(len(s.stack) for s in steps) == 3
    assert steps[-1].stack == ()
    assert steps[-1].description == "✅ In-order traversal complete"


def test_levelorder_reports_levels(tree):
    levels = [s.description for s in bst_traverse(tree, "levelorder") if s.kind is StepKind.LEVEL]
    assert levels == [
        "📊 Processing level 1 (1 nodes)",
        "📊 Processing level 2 (2 nodes)",
        "📊 Processing level 3 (4 nodes)",
    ]


def test_insert_narration(tree):
    m = tree.insert(12)
    descriptions = [s.description for s in bst_insert(tree, m)]
    assert descriptions == [
        "Comparing 12 with 25",
        "Comparing 12 with 15",
        "Comparing 12 with 10",
        "12 > 10, inserting as right child",
        "Successfully inserted 12",
    ]


def test_duplicate_insert_is_narrated_no_op(tree):
    m = tree.insert(20)
    assert m.duplicate
    assert len(tree) == 7
    assert list(bst_insert(tree, m))[-1].kind is StepKind.EXISTS


def test_first_insert_becomes_root():
    t = BinarySearchTree()
    m = t.insert(8)
    assert t.root == m.node_id
    assert list(bst_insert(t, m))[0].description == "Inserted 8 as root node"


def test_search_found_and_not_found(tree):
    found = list(bst_search(tree, 30))
    assert found[-1].kind is StepKind.FOUND
    assert [tree.value_of(n) for n in found[-1].path] == [25, 35, 30]
    missing = list(bst_search(tree, 33))
    assert missing[-1].kind is StepKind.NOT_FOUND
    assert missing[-1].description == "Value 33 not found in the tree"


def test_delete_two_children_relinks_successor(tree):
    thirty = tree.find(30)
    m = tree.delete(25)
    assert m.case == "two-children"
    assert m.successor_id == thirty.id
    assert tree.root == thirty.id
    assert tree.nodes[thirty.id].value == 30
    assert tree.inorder_values() == [10, 15, 20, 30, 35, 40]
    assert tree.is_valid()
    steps = list(bst_delete(tree, m))
    assert any(s.description == "In-order successor 30 takes the place of 25" for s in steps)


def test_delete_leaf_and_one_child(tree):
    assert tree.delete(10).case == "leaf"
    m = tree.delete(15)
    assert m.case == "one-child"
    assert tree.value_of(m.replacement_id) == 20
    assert tree.inorder_values() == [20, 25, 30, 35, 40]
    assert tree.is_valid()


def test_delete_missing_value_is_not_found(tree):
    m = tree.delete(99)
    assert not m.found
    assert len(tree) == 7
    assert list(bst_delete(tree, m))[-1].kind is StepKind.NOT_FOUND


def test_random_inserts_and_deletes_keep_bst_order():
    rng = random.Random(7)
    t = BinarySearchTree()
    values = rng.sample(range(200), 60)
    for v in values:
        t.insert(v)
    for v in values[::3]:
        t.delete(v)
    assert t.is_valid()
    assert t.inorder_values() == sorted(set(values) - set(values[::3]))


def test_traversal_of_empty_tree():
    steps = list(bst_traverse(BinarySearchTree(), "preorder"))
    assert len(steps) == 2
    assert steps[-1].output == "Pre-order Traversal: "
