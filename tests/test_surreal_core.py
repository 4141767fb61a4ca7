"""
Core invariants for Surreal construction, sign and the unit steps.

- zero / from_int / aliasing / raw literal construction
- exactly one of zero / positive / negative
- the successor / predecessor state machine, and its inverse property
- increment / decrement rebind one value and leave aliases alone
"""

import pytest

from conway_int import (
    EMPTY,
    ZERO_NODE,
    MalformedSurrealError,
    Surreal,
    pair,
)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:

    def test_default_is_zero(self):
        assert Surreal().is_zero()
        assert Surreal().node == ZERO_NODE

    def test_zero_constructor(self):
        z = Surreal.zero()
        assert z.is_zero()
        assert z.to_int() == 0

    def test_from_int_zero_is_zero(self):
        z = Surreal.from_int(0)
        assert z.is_zero()
        assert z.to_int() == 0

    def test_int_argument_goes_through_from_int(self):
        assert Surreal(4).node == Surreal.from_int(4).node

    @pytest.mark.parametrize("k", range(-8, 9))
    def test_roundtrip(self, k):
        assert Surreal.from_int(k).to_int() == k

    def test_positive_form_is_a_left_chain(self):
        assert Surreal(2).node == pair(pair(ZERO_NODE, EMPTY), EMPTY)

    def test_negative_form_is_a_right_chain(self):
        assert Surreal(-2).node == pair(EMPTY, pair(EMPTY, ZERO_NODE))

    def test_alias_shares_form(self):
        a = Surreal(3)
        b = Surreal(a)
        assert b.node is a.node

    def test_copy_shares_form(self):
        a = Surreal(-3)
        assert a.copy().node is a.node

    def test_node_literal(self):
        s = Surreal(pair(ZERO_NODE, EMPTY))
        assert s.to_int() == 1

    def test_list_literal(self):
        assert Surreal([[[], []], []]).to_int() == 1
        assert Surreal([[], [[], []]]).to_int() == -1

    def test_object_literal(self):
        one = {"left": {"left": {}, "right": {}}, "right": {}}
        assert Surreal(one).to_int() == 1

    def test_tuple_literal(self):
        assert Surreal(((), ())).is_zero()

    def test_two_sided_literal_is_rejected(self):
        with pytest.raises(MalformedSurrealError):
            Surreal(pair(ZERO_NODE, ZERO_NODE))

    def test_empty_literal_is_rejected(self):
        with pytest.raises(MalformedSurrealError):
            Surreal(EMPTY)
        with pytest.raises(MalformedSurrealError):
            Surreal([])

    @pytest.mark.parametrize("bad", [True, False, 1.5, "3", object()])
    def test_bad_types_are_rejected(self, bad):
        with pytest.raises(TypeError):
            Surreal(bad)

    @pytest.mark.parametrize("bad", [True, 2.0, "2"])
    def test_from_int_rejects_non_int(self, bad):
        with pytest.raises(TypeError):
            Surreal.from_int(bad)

    def test_deep_values(self):
        big = Surreal.from_int(3000)
        assert big.to_int() == 3000
        assert big.negate().to_int() == -3000


# ---------------------------------------------------------------------------
# Sign
# ---------------------------------------------------------------------------

class TestSign:

    @pytest.mark.parametrize("k", range(-6, 7))
    def test_exactly_one_sign(self, k):
        s = Surreal(k)
        flags = [s.is_zero(), s.is_positive(), s.is_negative()]
        assert flags.count(True) == 1

    @pytest.mark.parametrize("k", range(1, 6))
    def test_positive(self, k):
        assert Surreal(k).is_positive()
        assert not Surreal(k).is_negative()

    @pytest.mark.parametrize("k", range(-5, 0))
    def test_negative(self, k):
        assert Surreal(k).is_negative()
        assert not Surreal(k).is_positive()

    def test_zero_is_neither(self):
        z = Surreal()
        assert not z.is_positive()
        assert not z.is_negative()

    def test_bool(self):
        assert not Surreal()
        assert Surreal(1)
        assert Surreal(-1)


# ---------------------------------------------------------------------------
# Successor / predecessor
# ---------------------------------------------------------------------------

class TestUnitSteps:

    def test_successor_of_zero_wraps_left(self):
        assert Surreal().successor().node == pair(ZERO_NODE, EMPTY)

    def test_predecessor_of_zero_wraps_right(self):
        assert Surreal().predecessor().node == pair(EMPTY, ZERO_NODE)

    def test_successor_of_positive_wraps_left(self):
        two = Surreal(2)
        assert two.successor().node.left is two.node

    def test_predecessor_of_negative_wraps_right(self):
        m2 = Surreal(-2)
        assert m2.predecessor().node.right is m2.node

    def test_successor_of_negative_unwraps(self):
        m2 = Surreal(-2)
        assert m2.successor().node is m2.node.right

    def test_predecessor_of_positive_unwraps(self):
        two = Surreal(2)
        assert two.predecessor().node is two.node.left

    @pytest.mark.parametrize("k", range(-5, 6))
    def test_successor_adds_one(self, k):
        assert Surreal(k).successor().to_int() == k + 1

    @pytest.mark.parametrize("k", range(-5, 6))
    def test_predecessor_subtracts_one(self, k):
        assert Surreal(k).predecessor().to_int() == k - 1

    @pytest.mark.parametrize("k", range(-5, 6))
    def test_inverses(self, k):
        s = Surreal(k)
        assert s.successor().predecessor().node == s.node
        assert s.predecessor().successor().node == s.node

    def test_three_predecessors_reach_zero(self):
        s = Surreal.from_int(3)
        s = s.predecessor().predecessor().predecessor()
        assert s.is_zero()

    def test_successor_does_not_mutate(self):
        s = Surreal(2)
        before = s.node
        s.successor()
        s.predecessor()
        assert s.node is before


# ---------------------------------------------------------------------------
# Increment / decrement
# ---------------------------------------------------------------------------

class TestMutators:

    def test_increment_rebinds(self):
        s = Surreal(1)
        s.increment()
        assert s.to_int() == 2

    def test_decrement_rebinds(self):
        s = Surreal(-1)
        s.decrement()
        assert s.to_int() == -2

    def test_alias_is_independent_after_increment(self):
        a = Surreal(5)
        b = Surreal(a)
        b.increment()
        assert a.to_int() == 5
        assert b.to_int() == 6

    def test_alias_is_independent_after_decrement(self):
        a = Surreal(0)
        b = a.copy()
        b.decrement()
        b.decrement()
        assert a.is_zero()
        assert b.to_int() == -2

    def test_shared_structure_is_untouched(self):
        a = Surreal(2)
        inner = a.node.left
        a.decrement()
        assert a.node is inner
        assert inner == Surreal(1).node

    def test_mutators_return_none(self):
        s = Surreal()
        assert s.increment() is None
        assert s.decrement() is None
