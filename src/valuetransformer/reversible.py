"""Reversible transformer plus the combine and flip primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from valuetransformer.result import Result
from valuetransformer.transformer import Transformer, TransformerLike

I = TypeVar("I")
O = TypeVar("O")
E = TypeVar("E")


@dataclass(frozen=True)
class ReversibleTransformer(Generic[I, O, E]):
    """A pair of mappings ``I -> Result[O, E]`` and ``O -> Result[I, E]``.

    Only the types are paired. Whether reversing a forward result gives
    back the original value depends entirely on the supplied closures.
    """

    _forward: Callable[[I], Result[O, E]]
    _reverse: Callable[[O], Result[I, E]]

    def forward_transform(self, value: I) -> Result[O, E]:
        return self._forward(value)

    def reverse_transform(self, value: O) -> Result[I, E]:
        return self._reverse(value)

    def transform(self, value: I) -> Result[O, E]:
        return self._forward(value)

    def __call__(self, value: I) -> Result[O, E]:
        return self._forward(value)

    def __rshift__(self, other: Any) -> Any:
        from valuetransformer.composition import compose

        return compose(self, other)

    def __lshift__(self, other: Any) -> Any:
        from valuetransformer.composition import compose_reverse

        return compose_reverse(self, other)


def combine(
    transformer: TransformerLike[I, O],
    reverse_transformer: TransformerLike[O, I],
) -> ReversibleTransformer[I, O, Any]:
    """Pair two one-way transformers into a reversible one.

    Args:
        transformer: Used as the forward direction
        reverse_transformer: Used as the reverse direction

    Returns:
        ReversibleTransformer running ``transformer`` forward and
        ``reverse_transformer`` in reverse. No inverse check is made.
    """
    return ReversibleTransformer(transformer.transform, reverse_transformer.transform)


def flip(reversible: ReversibleTransformer[I, O, E]) -> ReversibleTransformer[O, I, E]:
    """Swap the forward and reverse directions.

    Flipping twice restores the original closures, so
    ``flip(flip(r)) == r``.
    """
    return ReversibleTransformer(reversible._reverse, reversible._forward)


def forward(reversible: ReversibleTransformer[I, O, E]) -> Transformer[I, O, E]:
    """Forward direction as a one-way Transformer."""
    return Transformer(reversible._forward)


def reverse(reversible: ReversibleTransformer[I, O, E]) -> Transformer[O, I, E]:
    """Reverse direction as a one-way Transformer."""
    return Transformer(reversible._reverse)
