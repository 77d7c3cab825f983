"""Result channel shared by every transformer - pure and dependency-free."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from valuetransformer.errors import TransformError

V = TypeVar("V")
E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class Result(Generic[V, E]):
    """
    Outcome of a single transformation.

    Kinds:
    - success: the transformation produced ``value``
    - failure: the transformation was rejected for ``error``

    The kind decides the variant, so ``None`` is a valid success value.
    """

    kind: Literal["success", "failure"]
    value: V | None = None
    error: E | None = None

    @staticmethod
    def Success(value: Any) -> "Result[Any, Any]":
        return Result(kind="success", value=value)

    @staticmethod
    def Failure(error: Any) -> "Result[Any, Any]":
        return Result(kind="failure", error=error)

    @property
    def is_success(self) -> bool:
        return self.kind == "success"

    @property
    def is_failure(self) -> bool:
        return self.kind == "failure"

    def map(self, func: Callable[[V], R]) -> Result[R, E]:
        if self.kind == "failure":
            return self  # type: ignore[return-value]
        return Result.Success(func(self.value))  # type: ignore[arg-type]

    def flat_map(self, func: Callable[[V], Result[R, E]]) -> Result[R, E]:
        """Chain a result-returning function, keeping the first failure."""
        if self.kind == "failure":
            return self  # type: ignore[return-value]
        return func(self.value)  # type: ignore[arg-type]

    def value_or(self, default: V) -> V:
        if self.kind == "failure":
            return default
        return self.value  # type: ignore[return-value]

    def unwrap(self) -> V:
        """Return the success value or raise TransformError with the failure reason."""
        if self.kind == "failure":
            raise TransformError(f"Transformation failed: {self.error!r}", self.error)
        return self.value  # type: ignore[return-value]
