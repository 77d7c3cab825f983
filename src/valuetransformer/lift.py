"""Lift transformers into optional and collection shapes.

Every lift accepts a one-way transformer or a reversible transformer.
A reversible argument gives a reversible result whose reverse direction
is the matching lift of the flipped transformer.

Absent values are ``None``. They short-circuit: the wrapped transformer
is never called with ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from valuetransformer.result import Result
from valuetransformer.reversible import ReversibleTransformer, combine, flip
from valuetransformer.transformer import Transformer, TransformerLike

logger = logging.getLogger(__name__)

I = TypeVar("I")
O = TypeVar("O")

_MISSING: Any = object()


def _to_optional(transformer: TransformerLike[I, O]) -> Transformer[I, O | None, Any]:
    def run(value: I) -> Result[O | None, Any]:
        return transformer.transform(value)

    return Transformer(run)


def _from_optional(transformer: TransformerLike[I, O], default: O) -> Transformer[I | None, O, Any]:
    def run(value: I | None) -> Result[O, Any]:
        if value is None:
            return Result.Success(default)
        return transformer.transform(value)

    return Transformer(run)


def _both_optional(transformer: TransformerLike[I, O]) -> Transformer[I | None, O | None, Any]:
    return _from_optional(_to_optional(transformer), None)


def _collect(
    transformer: TransformerLike[I, O],
    factory: Callable[[list[O]], Any],
) -> Transformer[Iterable[I], Any, Any]:
    def run(values: Iterable[I]) -> Result[Any, Any]:
        transformed: list[O] = []
        for index, value in enumerate(values):
            result = transformer.transform(value)
            if result.is_failure:
                logger.debug("Collection transform failed at index %d: %r", index, result.error)
                return result
            transformed.append(result.value)  # type: ignore[arg-type]
        return Result.Success(factory(transformed))

    return Transformer(run)


def lift_to_optional_output(transformer: Any, default_reverse_value: Any = _MISSING) -> Any:
    """Lift so the output side may be absent.

    Forward passes successes and failures through unchanged.
    For a reversible transformer the reverse direction accepts ``None``
    and maps it to ``default_reverse_value``.

    Args:
        transformer: Transformer or ReversibleTransformer to lift
        default_reverse_value: Input reconstructed when reversing from
            ``None``; required for reversible transformers and rejected
            for one-way ones, which have no reverse direction

    Returns:
        Transformer[I, O | None] or ReversibleTransformer[I, O | None]

    Raises:
        TypeError: If a reversible transformer is given without a default,
            or a one-way transformer with one
    """
    if isinstance(transformer, ReversibleTransformer):
        if default_reverse_value is _MISSING:
            raise TypeError("default_reverse_value is required to lift a reversible transformer")
        return combine(_to_optional(transformer), _from_optional(flip(transformer), default_reverse_value))
    if default_reverse_value is not _MISSING:
        raise TypeError("default_reverse_value only applies to reversible transformers")
    return _to_optional(transformer)


def lift_from_optional_input(transformer: Any, default_output_value: Any) -> Any:
    """Lift so the input side may be absent.

    ``None`` input succeeds with ``default_output_value`` immediately;
    present input is delegated. For a reversible transformer the reverse
    direction produces an optional input and never yields ``None`` itself.

    Args:
        transformer: Transformer or ReversibleTransformer to lift
        default_output_value: Output returned for ``None`` input

    Returns:
        Transformer[I | None, O] or ReversibleTransformer[I | None, O]
    """
    if isinstance(transformer, ReversibleTransformer):
        return combine(_from_optional(transformer, default_output_value), _to_optional(flip(transformer)))
    return _from_optional(transformer, default_output_value)


def lift_both_optional(transformer: Any) -> Any:
    """Lift so both sides may be absent; ``None`` maps to ``None`` in each direction."""
    if isinstance(transformer, ReversibleTransformer):
        return combine(_both_optional(transformer), _both_optional(flip(transformer)))
    return _both_optional(transformer)


def lift_to_collection(transformer: Any, factory: Callable[[list[Any]], Any] = list) -> Any:
    """Lift to operate element-wise over a sequence.

    Semantics:
        - Elements are transformed left to right
        - The first failing element's failure is returned unchanged
        - Partial results are discarded
        - Output element i corresponds to input element i

    Args:
        transformer: Transformer or ReversibleTransformer to lift
        factory: Builds the output collection from a list (e.g. ``tuple``);
            used in both directions

    Returns:
        Transformer[Iterable[I], C[O]] or the reversible equivalent
    """
    if isinstance(transformer, ReversibleTransformer):
        return combine(_collect(transformer, factory), _collect(flip(transformer), factory))
    return _collect(transformer, factory)


def lift_from_mapping(mapping: Mapping[I, O], default_output_value: Any = _MISSING) -> Transformer[I, O, Any]:
    """Create a Transformer that looks values up in a mapping.

    Args:
        mapping: Lookup table from input to output values
        default_output_value: Output for keys not in ``mapping``; without
            it a missing key fails with ``KeyError``

    Returns:
        Transformer[I, O] backed by the mapping; an unhashable input
        fails with the ``TypeError`` the lookup raised, default or not
    """
    def run(value: I) -> Result[O, Any]:
        try:
            found = value in mapping
        except TypeError as exc:
            return Result.Failure(exc)
        if found:
            return Result.Success(mapping[value])
        if default_output_value is _MISSING:
            return Result.Failure(KeyError(value))
        return Result.Success(default_output_value)

    return Transformer(run)
