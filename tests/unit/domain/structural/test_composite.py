"""Unit tests for the Composite example."""

import pytest

from pattern_catalog.domain.structural.composite import (
    Composite,
    CompositeExample,
    Leaf,
    client_code2,
)


def _tree() -> Composite:
    tree, branch1, branch2 = Composite(), Composite(), Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())
    branch2.add(Leaf())
    tree.add(branch1)
    tree.add(branch2)
    return tree


def test_leaf_operation() -> None:
    assert Leaf().operation() == "Leaf"
    assert not Leaf().is_composite()


def test_tree_aggregates_children_in_order() -> None:
    assert _tree().operation() == "Branch( Branch( Leaf + Leaf ) + Branch( Leaf ) )"


def test_empty_branch() -> None:
    assert Composite().operation() == "Branch(  )"


def test_leaf_child_management_is_noop() -> None:
    leaf = Leaf()
    leaf.add(Leaf())
    leaf.remove(Leaf())
    assert leaf.operation() == "Leaf"


def test_add_records_parent_and_remove_clears_it() -> None:
    branch, leaf = Composite(), Leaf()
    branch.add(leaf)
    assert leaf.parent is branch
    branch.remove(leaf)
    assert leaf.parent is None
    assert branch.children == ()


def test_remove_absent_child_is_noop() -> None:
    branch = Composite()
    branch.add(Leaf())
    branch.remove(Leaf())
    assert len(branch.children) == 1


def test_client_code2_only_adds_to_composites() -> None:
    assert client_code2(Leaf(), Leaf()) == "RESULT: Leaf"
    assert client_code2(Composite(), Leaf()) == "RESULT: Branch( Leaf )"


def test_example_final_tree() -> None:
    lines = CompositeExample().run().lines
    assert lines[1] == "RESULT: Leaf"
    assert lines[-1] == "RESULT: Branch( Branch( Leaf + Leaf ) + Branch( Leaf ) + Leaf )"


def test_add_moves_child_from_previous_parent() -> None:
    old_branch, new_branch, leaf = Composite(), Composite(), Leaf()
    old_branch.add(leaf)
    new_branch.add(leaf)
    assert old_branch.children == ()
    assert new_branch.children == (leaf,)
    assert leaf.parent is new_branch


def test_add_rejects_self_and_ancestors() -> None:
    tree, branch = Composite(), Composite()
    tree.add(branch)
    with pytest.raises(ValueError):
        branch.add(branch)
    with pytest.raises(ValueError):
        branch.add(tree)
    assert tree.operation() == "Branch( Branch(  ) )"
