"""Opt-in checks for the algebraic laws of reversible transformers.

Nothing in the library calls these; they are meant for callers'
own test suites.
"""

from __future__ import annotations

from typing import Any

from valuetransformer.composition import compose
from valuetransformer.result import Result
from valuetransformer.reversible import ReversibleTransformer, flip


def _same_outcome(left: Result[Any, Any], right: Result[Any, Any]) -> bool:
    # Exceptions compare by identity; two raised for the same reason are the same outcome
    if left.kind != right.kind:
        return False
    if left.is_success:
        return left.value == right.value
    if isinstance(left.error, BaseException) and isinstance(right.error, BaseException):
        return type(left.error) is type(right.error) and left.error.args == right.error.args
    return left.error == right.error


def flip_involution_holds(reversible: ReversibleTransformer[Any, Any, Any], value: Any) -> bool:
    """``flip(flip(r))`` transforms ``value`` exactly as ``r`` does."""
    return _same_outcome(flip(flip(reversible)).forward_transform(value), reversible.forward_transform(value))


def reverse_composition_holds(
    left: ReversibleTransformer[Any, Any, Any],
    right: ReversibleTransformer[Any, Any, Any],
    value: Any,
) -> bool:
    """Reversing ``compose(left, right)`` runs right's reverse, then left's."""
    expected = right.reverse_transform(value).flat_map(left.reverse_transform)
    return _same_outcome(compose(left, right).reverse_transform(value), expected)


def round_trips(reversible: ReversibleTransformer[Any, Any, Any], value: Any) -> bool:
    """Forward then reverse gives back ``value``.

    A failing forward or reverse transformation counts as not round-tripping.
    """
    result = reversible.forward_transform(value).flat_map(reversible.reverse_transform)
    return result.is_success and result.value == value
