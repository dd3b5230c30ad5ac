"""Option sets built from individual enum "granules".

A set of options is sometimes inclusive (a combined bit set passed around as
one value) and sometimes exclusive (one named granule at a time, when
iterating). :class:`GranularOptionSet` converts between the two views for any
``IntEnum`` whose members are the granules.

In bit-mask mode (the default) the granule with raw value ``k`` occupies bit
``1 << k``. Enums declared with ``indicates_bit_mask=False`` already carry
their final bit values and are used unshifted.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Type, TypeVar

from pixelkit.errors import BitWidthOverflow
from pixelkit.logging_utils import get_logger

DEFAULT_BIT_WIDTH = 64

_LOGGER = get_logger("Granular")

_BIT_MASK_ATTR = "__granule_bit_mask__"
_BIT_WIDTH_ATTR = "__granule_bit_width__"

E = TypeVar("E", bound=Type[IntEnum])


def indicates_bit_mask(granule_type: Type[IntEnum]) -> bool:
    return bool(getattr(granule_type, _BIT_MASK_ATTR, True))


def bit_width(granule_type: Type[IntEnum]) -> int:
    return int(getattr(granule_type, _BIT_WIDTH_ATTR, DEFAULT_BIT_WIDTH))


def validate_granules(granule_type: Type[IntEnum], width: Optional[int] = None) -> None:
    """Raise :class:`BitWidthOverflow` if a granule cannot be encoded in *width* bits.

    Exact-value granules must also set at least one bit.
    """
    limit = bit_width(granule_type) if width is None else int(width)
    shifting = indicates_bit_mask(granule_type)
    for granule in granule_type:
        raw = int(granule)
        if shifting:
            if raw < 0 or raw >= limit:
                raise BitWidthOverflow(
                    f"{granule_type.__name__}.{granule.name} shifts to bit {raw}, outside a {limit}-bit set"
                )
        elif raw == 0:
            raise BitWidthOverflow(
                f"{granule_type.__name__}.{granule.name} is 0, which sets no bits and would match every set"
            )
        elif raw < 0 or raw.bit_length() > limit:
            raise BitWidthOverflow(
                f"{granule_type.__name__}.{granule.name} value {raw} does not fit a {limit}-bit set"
            )


def granule_enum(
    granule_type: Optional[E] = None,
    *,
    indicates_bit_mask: bool = True,
    bit_width: int = DEFAULT_BIT_WIDTH,
):
    """Class decorator declaring how an ``IntEnum`` encodes into an option set.

    Usable bare (``@granule_enum``) or with arguments. Validation happens
    here, when the enum is declared, rather than at encode time.
    """

    def _decorate(cls: E) -> E:
        setattr(cls, _BIT_MASK_ATTR, bool(indicates_bit_mask))
        setattr(cls, _BIT_WIDTH_ATTR, int(bit_width))
        validate_granules(cls)
        return cls

    if granule_type is not None:
        return _decorate(granule_type)
    return _decorate


def encode(granule: IntEnum) -> int:
    """Raw option-set value for a single granule."""
    raw = int(granule)
    if indicates_bit_mask(type(granule)):
        return 1 << raw
    return raw


@dataclass(frozen=True)
class GranularOptionSet:
    granule_type: Type[IntEnum]
    raw_value: int = 0

    def __post_init__(self) -> None:
        if self.raw_value < 0:
            raise ValueError("option set raw values cannot be negative")
        validate_granules(self.granule_type)

    @classmethod
    def from_granules(cls, granule_type: Type[IntEnum], granules: Iterable[IntEnum]) -> "GranularOptionSet":
        raw = 0
        for granule in granules:
            if not isinstance(granule, granule_type):
                raise TypeError(f"{granule!r} is not a {granule_type.__name__} granule")
            raw |= encode(granule)
        return cls(granule_type, raw)

    @classmethod
    def of(cls, granule: IntEnum) -> "GranularOptionSet":
        """Option set holding one granule, encoded per its enum's mode."""
        return cls(type(granule), encode(granule))

    @classmethod
    def exactly(cls, granule: IntEnum) -> "GranularOptionSet":
        return cls(type(granule), int(granule))

    @classmethod
    def shifting(cls, granule: IntEnum) -> "GranularOptionSet":
        return cls(type(granule), 1 << int(granule))

    def contains(self, granule: IntEnum) -> bool:
        bits = encode(granule)
        return self.raw_value & bits == bits

    def __contains__(self, granule: object) -> bool:
        if not isinstance(granule, self.granule_type):
            return False
        return self.contains(granule)

    @property
    def granules(self) -> List[IntEnum]:
        """Every granule contained in this set, in declaration order."""
        return [granule for granule in self.granule_type if self.contains(granule)]

    def __iter__(self) -> Iterator[IntEnum]:
        return iter(self.granules)

    @property
    def is_empty(self) -> bool:
        return self.raw_value == 0

    def _check_compatible(self, other: "GranularOptionSet") -> None:
        if other.granule_type is not self.granule_type:
            raise TypeError(
                f"cannot combine {self.granule_type.__name__} and {other.granule_type.__name__} option sets"
            )

    def union(self, other: "GranularOptionSet") -> "GranularOptionSet":
        self._check_compatible(other)
        return GranularOptionSet(self.granule_type, self.raw_value | other.raw_value)

    def intersection(self, other: "GranularOptionSet") -> "GranularOptionSet":
        self._check_compatible(other)
        return GranularOptionSet(self.granule_type, self.raw_value & other.raw_value)

    __or__ = union
    __and__ = intersection

    def inserting(self, granule: IntEnum) -> "GranularOptionSet":
        return self.union(GranularOptionSet.of(granule))


def construct(granule_type: Type[IntEnum], granules: Iterable[IntEnum]) -> GranularOptionSet:
    """Bitwise-OR the encodings of *granules* into one option set."""
    option_set = GranularOptionSet.from_granules(granule_type, granules)
    _LOGGER.debug("Built %s option set raw=%d", granule_type.__name__, option_set.raw_value)
    return option_set


def decode(option_set: GranularOptionSet) -> List[IntEnum]:
    """Granules whose encoding is fully contained in *option_set*."""
    return option_set.granules
