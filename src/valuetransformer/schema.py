"""Schema-backed leaf transformers for validation and codec pipelines."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel

from valuetransformer.errors import SchemaError
from valuetransformer.result import Result
from valuetransformer.reversible import ReversibleTransformer
from valuetransformer.transformer import Transformer

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class OutputSchema(Protocol[T]):
    """Anything that can check a raw value and return its typed form.

    ``validate`` signals rejection by raising; ``from_schema`` turns that
    into a failed Result. ``describe`` names the schema in failure messages.
    """

    def validate(self, value: Any) -> T:
        ...

    def describe(self) -> str:
        ...


@dataclass(frozen=True)
class CallableSchema(OutputSchema[T]):
    """Schema backed by a plain function such as ``int`` or ``Decimal``.

    The function's return value is the typed result; whatever it raises
    becomes the failure message. ``_description`` overrides the function
    name in that message.
    """

    fn: Callable[[Any], T]
    _description: str | None = None

    def validate(self, value: Any) -> T:
        return self.fn(value)

    def describe(self) -> str:
        if self._description:
            return self._description
        return getattr(self.fn, "__name__", repr(self.fn))


@dataclass(frozen=True)
class PydanticSchema(OutputSchema[M]):
    """Schema that validates with a Pydantic model."""

    model: type[M]

    def validate(self, value: Any) -> M:
        return self.model.model_validate(value)

    def describe(self) -> str:
        return f"PydanticSchema({self.model.__name__})"


def from_schema(schema: OutputSchema[T]) -> Transformer[Any, T, SchemaError]:
    """Create a Transformer that validates values against a schema.

    Any exception raised by the schema becomes a SchemaError failure
    carrying the rejected raw value.
    """
    def run(value: Any) -> Result[T, SchemaError]:
        try:
            return Result.Success(schema.validate(value))
        except Exception as e:
            logger.debug("%s rejected %r: %s", schema.describe(), value, e)
            return Result.Failure(SchemaError(f"{schema.describe()}: {e}", value))

    return Transformer(run)


def model_codec(model: type[M]) -> ReversibleTransformer[Mapping[str, Any], M, SchemaError]:
    """Reversible transformer between plain mappings and a Pydantic model.

    Forward validates with ``model_validate``; reverse dumps with
    ``model_dump``.
    """
    validate = from_schema(PydanticSchema(model))

    def dump(instance: M) -> Result[dict[str, Any], SchemaError]:
        if not isinstance(instance, model):
            return Result.Failure(
                SchemaError(f"Expected {model.__name__}, got {type(instance).__name__}", instance)
            )
        return Result.Success(instance.model_dump())

    return ReversibleTransformer(validate.transform, dump)


def json_codec(**dumps_kwargs: Any) -> ReversibleTransformer[str, Any, SchemaError]:
    """Reversible transformer between JSON text and Python values.

    Args:
        **dumps_kwargs: Passed to ``json.dumps`` for the reverse direction

    Returns:
        ReversibleTransformer parsing with ``json.loads`` and serializing
        with ``json.dumps``
    """
    def parse(value: str) -> Result[Any, SchemaError]:
        if not isinstance(value, (str, bytes, bytearray)):
            return Result.Failure(SchemaError(f"Expected JSON text, got {type(value).__name__}", value))
        try:
            return Result.Success(json.loads(value))
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and the int digit limit are all ValueError
            return Result.Failure(SchemaError(f"Invalid JSON: {e}", value))

    def serialize(value: Any) -> Result[str, SchemaError]:
        try:
            return Result.Success(json.dumps(value, **dumps_kwargs))
        except (TypeError, ValueError) as e:
            return Result.Failure(SchemaError(f"Failed to serialize JSON: {e}", value))

    return ReversibleTransformer(parse, serialize)
