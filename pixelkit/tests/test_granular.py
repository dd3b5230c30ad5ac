from __future__ import annotations

from enum import IntEnum
from itertools import combinations

import pytest

from pixelkit.errors import BitWidthOverflow
from pixelkit.granular import (
    GranularOptionSet,
    construct,
    decode,
    encode,
    granule_enum,
    indicates_bit_mask,
    validate_granules,
)


@granule_enum
class Letter(IntEnum):
    A = 0
    B = 1
    C = 2


@granule_enum(indicates_bit_mask=False)
class Edge(IntEnum):
    TOP = 1
    LEADING = 2
    BOTTOM = 4
    TRAILING = 8


class Plain(IntEnum):
    FIRST = 0
    SECOND = 5


def _subsets(members):
    for size in range(len(members) + 1):
        yield from combinations(members, size)


def test_bit_mask_encoding_shifts_raw_identity() -> None:
    assert indicates_bit_mask(Letter)
    assert [encode(letter) for letter in Letter] == [1, 2, 4]
    assert encode(Plain.SECOND) == 32


def test_exact_encoding_uses_raw_identity() -> None:
    assert not indicates_bit_mask(Edge)
    assert [encode(edge) for edge in Edge] == [1, 2, 4, 8]


def test_construct_and_decode_example() -> None:
    option_set = construct(Letter, [Letter.A, Letter.C])
    assert option_set.raw_value == 0b101
    assert decode(GranularOptionSet(Letter, 5)) == [Letter.A, Letter.C]


@pytest.mark.parametrize("granule_type", [Letter, Edge, Plain])
def test_every_subset_round_trips(granule_type) -> None:
    members = list(granule_type)
    for subset in _subsets(members):
        decoded = decode(construct(granule_type, subset))
        assert set(decoded) == set(subset)


def test_decode_preserves_declaration_order() -> None:
    option_set = construct(Edge, [Edge.TRAILING, Edge.TOP])
    assert option_set.granules == [Edge.TOP, Edge.TRAILING]
    assert list(option_set) == [Edge.TOP, Edge.TRAILING]


def test_contains_requires_every_bit() -> None:
    option_set = GranularOptionSet(Letter, 0b011)
    assert option_set.contains(Letter.A)
    assert Letter.B in option_set
    assert Letter.C not in option_set
    assert Edge.TOP not in option_set


def test_single_granule_constructors() -> None:
    assert GranularOptionSet.of(Letter.C).raw_value == 4
    assert GranularOptionSet.of(Edge.BOTTOM).raw_value == 4
    assert GranularOptionSet.shifting(Edge.LEADING).raw_value == 4
    assert GranularOptionSet.exactly(Letter.C).raw_value == 2


def test_set_algebra() -> None:
    left = construct(Letter, [Letter.A, Letter.B])
    right = construct(Letter, [Letter.B, Letter.C])
    assert (left | right).granules == [Letter.A, Letter.B, Letter.C]
    assert (left & right).granules == [Letter.B]
    assert left.inserting(Letter.C) == left | right
    assert GranularOptionSet(Letter).is_empty
    with pytest.raises(TypeError):
        left | construct(Edge, [Edge.TOP])


def test_construct_rejects_foreign_granules() -> None:
    with pytest.raises(TypeError):
        construct(Letter, [Edge.TOP])


def test_declaring_overflowing_enum_fails_fast() -> None:
    with pytest.raises(BitWidthOverflow):

        @granule_enum(bit_width=8)
        class TooWide(IntEnum):
            LOW = 0
            HIGH = 8


def test_negative_identity_overflows_in_bit_mask_mode() -> None:
    class Negative(IntEnum):
        BAD = -1

    with pytest.raises(BitWidthOverflow):
        validate_granules(Negative)
    with pytest.raises(BitWidthOverflow):
        GranularOptionSet(Negative)


def test_exact_values_must_fit_bit_width() -> None:
    with pytest.raises(BitWidthOverflow):

        @granule_enum(indicates_bit_mask=False, bit_width=4)
        class Wide(IntEnum):
            SMALL = 1
            LARGE = 16


def test_validate_with_explicit_width() -> None:
    validate_granules(Plain, 6)
    with pytest.raises(BitWidthOverflow):
        validate_granules(Plain, 5)


def test_negative_raw_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        GranularOptionSet(Letter, -1)


def test_exact_mode_rejects_zero_valued_granules() -> None:
    with pytest.raises(BitWidthOverflow):

        @granule_enum(indicates_bit_mask=False)
        class WithNone(IntEnum):
            NONE = 0
            ONE = 1

    class Unchecked(IntEnum):
        NONE = 0
        ONE = 1

    setattr(Unchecked, "__granule_bit_mask__", False)
    with pytest.raises(BitWidthOverflow):
        construct(Unchecked, [Unchecked.ONE])
