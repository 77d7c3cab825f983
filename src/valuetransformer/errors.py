"""Error types for value transformation."""

from __future__ import annotations


class TransformError(Exception):
    """Error raised when a failed Result is unwrapped.

    The failure payload is kept on ``reason`` unchanged.
    """

    def __init__(self, message: str, reason: object) -> None:
        self.reason = reason
        super().__init__(message)

    def __repr__(self) -> str:
        return f"TransformError({super().__repr__()}, reason={self.reason!r})"


class SchemaError(Exception):
    """Failure reason returned by schema-backed transformers.

    Returned inside ``Result.Failure``, not raised. ``raw_value`` is the
    input the schema or codec rejected, so a failing stage of a longer
    pipeline can be traced back to the value it received.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"SchemaError({self.args[0]!r}, raw_value={self.raw_value!r})"
