"""Tests for optional, collection and mapping lifts."""

import logging

import pytest

from valuetransformer import (
    Result,
    ReversibleTransformer,
    flip,
    lift_both_optional,
    lift_from_mapping,
    lift_from_optional_input,
    lift_to_collection,
    lift_to_optional_output,
)

from fakes import RecordingTransformer, always_fail, parse_int, string_int


class TestLiftFromOptionalInput:
    def test_present_value(self) -> None:
        transformer = lift_from_optional_input(parse_int, 0)
        assert transformer.transform("5") == Result.Success(5)

    def test_present_value_failure(self) -> None:
        assert lift_from_optional_input(parse_int, 0).transform("5.5").is_failure

    def test_absent_value_gives_default(self) -> None:
        assert lift_from_optional_input(parse_int, 0).transform(None) == Result.Success(0)

    def test_absent_value_never_reaches_transformer(self) -> None:
        recorder = RecordingTransformer(always_fail("should not run"))
        transformer = lift_from_optional_input(recorder, "default")

        assert transformer.transform(None) == Result.Success("default")
        assert recorder.calls == []

    def test_reversible(self) -> None:
        transformer = lift_from_optional_input(string_int, 0)
        assert isinstance(transformer, ReversibleTransformer)
        assert transformer.forward_transform("5") == Result.Success(5)
        assert transformer.forward_transform("5.5").is_failure
        assert transformer.forward_transform(None) == Result.Success(0)
        assert transformer.reverse_transform(6) == Result.Success("6")
        assert flip(transformer).reverse_transform("6.5").is_failure


class TestLiftToOptionalOutput:
    def test_one_way(self) -> None:
        transformer = lift_to_optional_output(parse_int)
        assert transformer.transform("5") == Result.Success(5)
        assert transformer.transform("5.5").is_failure

    def test_reversible(self) -> None:
        transformer = lift_to_optional_output(string_int, default_reverse_value="zero")
        assert transformer.forward_transform("7") == Result.Success(7)
        assert transformer.forward_transform("7.5").is_failure
        assert transformer.reverse_transform(8) == Result.Success("8")
        assert flip(transformer).reverse_transform("8.5").is_failure

    def test_reversible_absent_gives_default(self) -> None:
        transformer = lift_to_optional_output(string_int, default_reverse_value="zero")
        assert transformer.reverse_transform(None) == Result.Success("zero")

    def test_reversible_requires_default(self) -> None:
        with pytest.raises(TypeError):
            lift_to_optional_output(string_int)

    def test_one_way_rejects_reverse_default(self) -> None:
        with pytest.raises(TypeError):
            lift_to_optional_output(parse_int, default_reverse_value="zero")


class TestLiftBothOptional:
    def test_one_way(self) -> None:
        transformer = lift_both_optional(parse_int)
        assert transformer.transform("6") == Result.Success(6)
        assert transformer.transform("6.5").is_failure
        assert transformer.transform(None) == Result.Success(None)

    def test_reversible(self) -> None:
        transformer = lift_both_optional(string_int)
        assert transformer.forward_transform("9") == Result.Success(9)
        assert transformer.forward_transform("9.5").is_failure
        assert transformer.forward_transform(None) == Result.Success(None)
        assert transformer.reverse_transform(10) == Result.Success("10")
        assert transformer.reverse_transform(None) == Result.Success(None)
        assert flip(transformer).reverse_transform("10.5").is_failure


class TestLiftToCollection:
    def test_transform_values_in_order(self) -> None:
        assert lift_to_collection(parse_int).transform(["11", "12"]) == Result.Success([11, 12])

    def test_any_failure_fails(self) -> None:
        assert lift_to_collection(parse_int).transform(["11", "12.5"]).is_failure

    def test_empty_sequence(self) -> None:
        assert lift_to_collection(parse_int).transform([]) == Result.Success([])

    def test_first_failure_is_reported_and_rest_skipped(self) -> None:
        recorder = RecordingTransformer(parse_int)
        result = lift_to_collection(recorder).transform(["1", "x", "y", "4"])

        assert result.is_failure
        assert "'x'" in str(result.error)
        assert recorder.calls == ["1", "x"]

    def test_factory(self) -> None:
        transformer = lift_to_collection(parse_int, factory=tuple)
        assert transformer.transform(iter(["1", "2"])) == Result.Success((1, 2))

    def test_reversible(self) -> None:
        transformer = lift_to_collection(string_int)
        assert transformer.forward_transform(["11", "12"]) == Result.Success([11, 12])
        assert transformer.forward_transform(["11", "12.5"]).is_failure
        assert transformer.reverse_transform([13, 14]) == Result.Success(["13", "14"])
        assert flip(transformer).reverse_transform(["13", "14.5"]).is_failure

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="valuetransformer.lift")
        lift_to_collection(parse_int).transform(["1", "2", "3.5"])
        assert "index 2" in caplog.text


class TestLiftFromMapping:
    def test_mapped_value(self) -> None:
        transformer = lift_from_mapping({"ten": 10}, default_output_value=0)
        assert transformer.transform("ten") == Result.Success(10)

    def test_unmapped_value_gives_default(self) -> None:
        transformer = lift_from_mapping({"ten": 10}, default_output_value=0)
        assert transformer.transform("eleven") == Result.Success(0)

    def test_unmapped_value_without_default_fails(self) -> None:
        result = lift_from_mapping({"ten": 10}).transform("eleven")
        assert result.is_failure
        assert isinstance(result.error, KeyError)

    def test_unhashable_value_fails(self) -> None:
        """A lookup the mapping cannot perform fails even when a default is set."""
        result = lift_from_mapping({"ten": 10}, default_output_value=0).transform(["ten"])
        assert result.is_failure
        assert isinstance(result.error, TypeError)
