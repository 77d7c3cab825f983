"""Sequential composition of transformers."""

# Composition satisfies the following laws:
#
# 1. Associativity: (a >> b) >> c == a >> (b >> c)
#    Both groupings map every input to the same output or error
#
# 2. Reverse order: compose(l, r).reverse_transform(v)
#       == r.reverse_transform(v).flat_map(l.reverse_transform)
#    Reversing a pipeline reverses each stage back to front
#
# 3. Flip distributes: flip(compose(l, r)) == compose(flip(r), flip(l))
#    Up to behaviour, not closure identity

from __future__ import annotations

from typing import Any, TypeVar, overload

from valuetransformer.result import Result
from valuetransformer.reversible import ReversibleTransformer, flip
from valuetransformer.transformer import Transformer, TransformerLike

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
E = TypeVar("E")


def _chain(left: TransformerLike[A, B], right: TransformerLike[B, C]) -> Transformer[A, C, Any]:
    def run(value: A) -> Result[C, Any]:
        return left.transform(value).flat_map(right.transform)

    return Transformer(run)


@overload
def compose(
    left: ReversibleTransformer[A, B, E], right: ReversibleTransformer[B, C, E]
) -> ReversibleTransformer[A, C, E]: ...


@overload
def compose(left: TransformerLike[A, B], right: TransformerLike[B, C]) -> Transformer[A, C, Any]: ...


def compose(left: Any, right: Any) -> Any:
    """Run ``left``, then feed its success value to ``right``.

    Semantics:
        - Two reversible transformers give a reversible transformer whose
          reverse runs right's reverse first, then left's
        - Any other pair of transformers gives a one-way Transformer;
          a reversible argument contributes its forward direction
        - The first failure is returned unchanged; right is not run
          when left fails

    Args:
        left: First stage
        right: Second stage, fed with left's output

    Returns:
        The composed transformer

    Raises:
        TypeError: If either argument is not a transformer
    """
    for arg in (left, right):
        if not isinstance(arg, TransformerLike):
            raise TypeError(f"Cannot compose {type(arg).__name__}: expected a transformer")

    if isinstance(left, ReversibleTransformer) and isinstance(right, ReversibleTransformer):
        forward_chain = _chain(left, right)
        reverse_chain = _chain(flip(right), flip(left))
        return ReversibleTransformer(forward_chain.transform, reverse_chain.transform)

    return _chain(left, right)


def compose_reverse(left: Any, right: Any) -> Any:
    """Right-to-left composition: ``compose_reverse(a, b) == compose(b, a)``."""
    return compose(right, left)
