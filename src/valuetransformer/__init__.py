from .composition import compose, compose_reverse
from .errors import SchemaError, TransformError
from .lift import (
    lift_both_optional,
    lift_from_mapping,
    lift_from_optional_input,
    lift_to_collection,
    lift_to_optional_output,
)
from .result import Result
from .reversible import ReversibleTransformer, combine, flip, forward, reverse
from .schema import CallableSchema, OutputSchema, PydanticSchema, from_schema, json_codec, model_codec
from .transformer import Transformer, TransformerLike

__all__ = [
    # Core
    "Result",
    "Transformer",
    "TransformerLike",
    "ReversibleTransformer",
    # Primitives
    "combine",
    "flip",
    "forward",
    "reverse",
    "compose",
    "compose_reverse",
    # Lifts
    "lift_to_optional_output",
    "lift_from_optional_input",
    "lift_both_optional",
    "lift_to_collection",
    "lift_from_mapping",
    # Schemas
    "OutputSchema",
    "CallableSchema",
    "PydanticSchema",
    "from_schema",
    "model_codec",
    "json_codec",
    # Errors
    "TransformError",
    "SchemaError",
]
