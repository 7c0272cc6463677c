"""Property tests for the merge laws of bundles and the registry."""

from hypothesis import given
from hypothesis import strategies as st

from crudmixin import SLOTS, Bundle, Registry

SLOT_NAMES = [s.value for s in SLOTS]


def _op(tag):
    def op():
        return tag

    return op


slot_subsets = st.sets(st.sampled_from(SLOT_NAMES))


@st.composite
def disjoint_pair(draw):
    left = draw(slot_subsets)
    right = draw(slot_subsets) - left
    return left, right


@given(pair=disjoint_pair(), swap=st.booleans())
def test_disjoint_slots_merge_to_union(pair, swap):
    left, right = pair
    a = Bundle("T", {s: _op(f"a-{s}") for s in left})
    b = Bundle("T", {s: _op(f"b-{s}") for s in right})
    expected = {s: (a[s] or b[s]) for s in SLOT_NAMES}

    registry = Registry()
    for bundle in (b, a) if swap else (a, b):
        registry.add_bundle(bundle)

    assert a.operations == b.operations == expected


@given(slots=slot_subsets)
def test_explicit_operations_survive_merges(slots):
    own = {s: _op(f"own-{s}") for s in slots}
    bundle = Bundle("T", own)
    registry = Registry()
    registry.add_bundle(bundle)

    for i in range(3):
        later = {s: _op(f"{i}-{s}") for s in SLOT_NAMES}
        registry.add_bundle(Bundle("T", later))

    for s in slots:
        assert bundle[s] is own[s]


@given(slots=slot_subsets)
def test_filled_slots_are_protected_after_merge(slots):
    target = Bundle("T")
    target.merge_all(Bundle("T", {s: _op("first") for s in slots}))
    snapshot = target.operations

    third = Bundle("T", {s: _op("third") for s in SLOT_NAMES})
    assert target.merge_all(third) == len(SLOT_NAMES) - len(slots)
    for s in slots:
        assert target[s] is snapshot[s]
        assert target.is_protected(s)


@given(slot=st.sampled_from(SLOT_NAMES))
def test_unprotect_grants_exactly_one_override(slot):
    target = Bundle("T", {slot: _op("original")})
    target.unprotect(**{f"allow_{s}": s == slot for s in SLOT_NAMES})

    second = _op("second")
    assert target.merge_one(Bundle("T", {slot: second}), slot)
    assert target[slot] is second
    assert not target.merge_one(Bundle("T", {slot: _op("third")}), slot)
    assert target[slot] is second


@given(slots=slot_subsets)
def test_other_types_never_exchange(slots):
    a = Bundle("A", {s: _op("a") for s in SLOT_NAMES})
    b = Bundle("B", {s: _op("b") for s in slots})
    registry = Registry()
    registry.add_bundle(a)
    registry.add_bundle(b)

    for s in SLOT_NAMES:
        assert (b[s] is None) == (s not in slots)
        assert a[s]() == "a"
