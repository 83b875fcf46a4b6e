# File: tests/test_tree.py
"""
TEST: Immutable Tree Edits
==========================

Every edit returns a new tree and leaves the input untouched. We test:

1. Factories and cloning (fresh ids, same structure)
2. Lookup helpers
3. Parameter edits, node removal, adding children
4. Validation of unsolvable trees
5. Model identification by structure
"""

import pytest

from rheonet.ids import IdGenerator
from rheonet.model import Dashpot, ModelValidationError, Parallel, Series, Spring
from rheonet.tree import (
    DEFAULT_DASHPOT_ETA,
    DEFAULT_SPRING_E,
    add_child,
    clone_model,
    count_elements,
    describe_node,
    find_node,
    find_parent,
    identify_model,
    iter_nodes,
    model_signature,
    new_dashpot,
    new_parallel,
    new_series,
    new_spring,
    remove_node,
    set_parameter,
    validate_tree,
)


@pytest.fixture
def zener():
    return Parallel("root", (
        Spring("s1", 60.0),
        Series("arm", (Spring("s2", 100.0), Dashpot("d1", 50.0))),
    ))


def test_factories_use_defaults():
    ids = IdGenerator()
    spring = new_spring(ids)
    dashpot = new_dashpot(ids)
    assert spring == Spring("n100", DEFAULT_SPRING_E)
    assert dashpot == Dashpot("n101", DEFAULT_DASHPOT_ETA)


def test_new_groups_start_with_spring_and_dashpot():
    ids = IdGenerator()
    series = new_series(ids)
    parallel = new_parallel(ids)

    assert identify_model(series) == "Maxwell Model"
    assert identify_model(parallel) == "Kelvin–Voigt Model"
    all_ids = [n.id for n in iter_nodes(series)] + [n.id for n in iter_nodes(parallel)]
    assert len(set(all_ids)) == 6


def test_clone_replaces_every_id(zener):
    clone = clone_model(zener, IdGenerator())

    assert model_signature(clone) == model_signature(zener)
    old_ids = {n.id for n in iter_nodes(zener)}
    new_ids = [n.id for n in iter_nodes(clone)]
    assert len(new_ids) == 5
    assert len(set(new_ids)) == 5
    assert not old_ids & set(new_ids)

    # Parameters survive the copy
    assert [n.E for n in iter_nodes(clone) if isinstance(n, Spring)] == [60.0, 100.0]


def test_lookup(zener):
    assert find_node(zener, "d1") == Dashpot("d1", 50.0)
    assert find_node(zener, "missing") is None
    assert find_parent(zener, "d1").id == "arm"
    assert find_parent(zener, "arm").id == "root"
    assert find_parent(zener, "root") is None
    assert count_elements(zener) == 3
    assert [n.id for n in iter_nodes(zener)] == ["root", "s1", "arm", "s2", "d1"]


def test_describe_node():
    assert describe_node(Spring("a", 100.0)) == "Spring (E=100)"
    assert describe_node(Dashpot("b", 2.5)) == "Dashpot (η=2.5)"
    assert describe_node(Series("c", ())) == "Series group"
    assert describe_node(Parallel("d", ())) == "Parallel group"


def test_set_parameter_returns_new_tree(zener):
    edited = set_parameter(zener, "s2", "E", 250.0)

    assert find_node(edited, "s2").E == 250.0
    assert find_node(zener, "s2").E == 100.0  # original untouched
    assert find_node(edited, "s1") is find_node(zener, "s1")


def test_set_parameter_ignores_non_positive(zener):
    assert set_parameter(zener, "d1", "eta", 0.0) is zener
    assert set_parameter(zener, "d1", "eta", -5.0) is zener


def test_set_parameter_rejects_wrong_key(zener):
    with pytest.raises(ModelValidationError):
        set_parameter(zener, "d1", "E", 10.0)
    with pytest.raises(ModelValidationError):
        set_parameter(zener, "arm", "children", 1.0)


def test_remove_node(zener):
    edited = remove_node(zener, "arm")
    assert [n.id for n in iter_nodes(edited)] == ["root", "s1"]
    assert count_elements(zener) == 3


def test_remove_root_returns_none(zener):
    assert remove_node(zener, "root") is None


def test_removing_last_child_leaves_invalid_group():
    tree = Series("root", (Spring("s1", 1.0), Parallel("p", (Dashpot("d1", 1.0),))))
    edited = remove_node(tree, "d1")
    assert find_node(edited, "p").children == ()
    with pytest.raises(ModelValidationError):
        validate_tree(edited)


def test_add_child(zener):
    ids = IdGenerator()
    edited = add_child(zener, "arm", new_dashpot(ids))
    assert [c.id for c in find_node(edited, "arm").children] == ["s2", "d1", "n100"]
    assert len(find_node(zener, "arm").children) == 2

    # Leaves cannot take children
    assert add_child(zener, "s1", new_spring(ids)) == zener


def test_validate_accepts_good_tree(zener):
    assert validate_tree(zener) is zener


@pytest.mark.parametrize("tree", [
    Series("root", ()),
    Series("root", (Spring("s1", 0.0),)),
    Parallel("root", (Dashpot("d1", -1.0),)),
    Series("root", (Spring("x", 1.0), Dashpot("x", 1.0))),
    Series("root", (Spring("s1", 1.0), "spring")),
])
def test_validate_rejects_bad_trees(tree):
    with pytest.raises(ModelValidationError):
        validate_tree(tree)


def test_identification_ignores_child_order():
    a = Series("r", (Spring("s", 1.0), Dashpot("d", 1.0)))
    b = Series("r", (Dashpot("d", 1.0), Spring("s", 1.0)))
    assert model_signature(a) == model_signature(b) == "ser(D,S)"
    assert identify_model(b) == "Maxwell Model"


def test_unrecognized_structure():
    tree = Parallel("r", (Spring("a", 1.0), Spring("b", 1.0)))
    assert identify_model(tree) is None
