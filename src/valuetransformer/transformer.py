"""One-way value transformer - the basic building block."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from valuetransformer.result import Result

I = TypeVar("I")
O = TypeVar("O")
E = TypeVar("E")
R = TypeVar("R")

I_contra = TypeVar("I_contra", contravariant=True)
O_co = TypeVar("O_co", covariant=True)


@runtime_checkable
class TransformerLike(Protocol[I_contra, O_co]):
    """Anything with a forward ``transform`` returning a Result."""

    def transform(self, value: I_contra) -> Result[O_co, Any]:
        ...


@dataclass(frozen=True)
class Transformer(Generic[I, O, E]):
    """A pure mapping ``I -> Result[O, E]``.

    Instances are callable and compose with ``>>`` (left to right)
    and ``<<`` (right to left).
    """

    _transform: Callable[[I], Result[O, E]]

    def transform(self, value: I) -> Result[O, E]:
        return self._transform(value)

    def __call__(self, value: I) -> Result[O, E]:
        return self._transform(value)

    def then(self, other: TransformerLike[O, R]) -> Transformer[I, R, E]:
        """Chain another transformer after this one.

        Args:
            other: Transformer fed with this transformer's success value

        Returns:
            New transformer running self, then other
        """
        from valuetransformer.composition import compose

        return compose(self, other)

    def __rshift__(self, other: Any) -> Any:
        from valuetransformer.composition import compose

        return compose(self, other)

    def __lshift__(self, other: Any) -> Any:
        from valuetransformer.composition import compose_reverse

        return compose_reverse(self, other)

    @staticmethod
    def from_callable(
        fn: Callable[[I], O],
        catch: tuple[type[BaseException], ...] = (Exception,),
    ) -> Transformer[I, O, BaseException]:
        """Create a Transformer from a plain function that raises on bad input.

        Exceptions listed in ``catch`` become the failure reason; anything
        else propagates to the caller.

        Example:
            >>> parse = Transformer.from_callable(int, catch=(ValueError,))
            >>> parse("3")
            Result(kind='success', value=3, error=None)
        """
        def run(value: I) -> Result[O, BaseException]:
            try:
                return Result.Success(fn(value))
            except catch as exc:
                return Result.Failure(exc)

        return Transformer(run)
