"""Shared comparison helpers for anything with two numeric dimensions."""
from __future__ import annotations

import operator
from enum import Enum
from typing import Callable, Protocol

Comparator = Callable[[float, float], bool]


class TwoDimensional(Protocol):
    """Something with two dimensions, like (x, y) or (width, height)."""

    @property
    def first_dimension(self) -> float: ...

    @property
    def second_dimension(self) -> float: ...


class ComparisonApproach(str, Enum):
    """How two 2D values are compared."""

    AT_ALL = "at_all"  # either dimension differs
    FIRST = "first"
    SECOND = "second"
    ADDITIVE = "additive"
    MULTIPLICATIVE = "multiplicative"
    DIVISIVE = "divisive"


_COMBINATORS = {
    ComparisonApproach.ADDITIVE: operator.add,
    ComparisonApproach.MULTIPLICATIVE: operator.mul,
    ComparisonApproach.DIVISIVE: operator.truediv,
}


def compare(
    lhs: TwoDimensional,
    rhs: TwoDimensional,
    approach: ComparisonApproach,
    comparator: Comparator,
) -> bool:
    if approach is ComparisonApproach.AT_ALL:
        return comparator(lhs.first_dimension, rhs.first_dimension) or comparator(
            lhs.second_dimension, rhs.second_dimension
        )
    if approach is ComparisonApproach.FIRST:
        return comparator(lhs.first_dimension, rhs.first_dimension)
    if approach is ComparisonApproach.SECOND:
        return comparator(lhs.second_dimension, rhs.second_dimension)
    combine = _COMBINATORS[approach]
    return comparator(
        combine(lhs.first_dimension, lhs.second_dimension),
        combine(rhs.first_dimension, rhs.second_dimension),
    )


def is_less_than(lhs: TwoDimensional, rhs: TwoDimensional, approach: ComparisonApproach) -> bool:
    return compare(lhs, rhs, approach, operator.lt)


def is_greater_than(lhs: TwoDimensional, rhs: TwoDimensional, approach: ComparisonApproach) -> bool:
    return compare(lhs, rhs, approach, operator.gt)


def smallest_dimension(value: TwoDimensional) -> float:
    return min(value.first_dimension, value.second_dimension)


def largest_dimension(value: TwoDimensional) -> float:
    return max(value.first_dimension, value.second_dimension)
