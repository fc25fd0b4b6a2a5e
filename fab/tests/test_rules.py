"""
Tests for the Rule model and producer arity detection.
"""

import pytest
from pydantic import ValidationError

from fab.errors import InvalidRule
import fab.rules as rules_module
from fab.rules import Rule, producer_arity


def _two(a, b):
    return a + b


def _defaulted(a, b=1):
    return a


def _keyword_only(*, attrs):
    return attrs


@pytest.mark.parametrize(
    "producer,expected_arity",
    [
        (lambda: 1, 0),
        (lambda attrs: attrs, 1),
        (lambda attrs=None: attrs, 0),
        (_defaulted, 1),
        (list, 0),
        (dict, 0),
    ],
)
def test_producer_arity(producer, expected_arity) -> None:
    """Test arity detection for zero and one argument producers"""
    assert producer_arity("x", producer) == expected_arity


@pytest.mark.parametrize(
    "producer",
    [
        _two,
        _keyword_only,
        lambda *args: args,
        "not callable",
        42,
    ],
)
def test_producer_arity_rejects_invalid_producers(producer) -> None:
    """Test that producers outside the zero/one argument contract fail"""
    with pytest.raises(
        InvalidRule, match="definition block must accept zero or one argument"
    ):
        producer_arity("speed", producer)


def test_invalid_rule_names_the_rule() -> None:
    with pytest.raises(InvalidRule) as exc_info:
        producer_arity("speed", _two)

    assert exc_info.value.name == "speed"
    assert "'speed'" in str(exc_info.value)


def test_produce_calls_zero_argument_producer_without_input() -> None:
    rule = Rule(name="age", producer=lambda: 5)

    assert rule.arity == 0
    assert rule.produce({"ignored": True}) == 5


def test_produce_passes_accumulator_to_one_argument_producer() -> None:
    rule = Rule(name="speed", producer=lambda attrs: attrs["weight"] * 2)

    assert rule.arity == 1
    assert rule.produce({"weight": 10}) == 20


def test_rule_name_is_kept_verbatim() -> None:
    assert Rule(name="  name ", producer=lambda: 1).name == "  name "


def test_rule_name_must_not_be_empty() -> None:
    with pytest.raises(ValidationError, match="Rule name cannot be empty"):
        Rule(name="", producer=lambda: 1)


def test_rule_rejects_invalid_producer_on_construction() -> None:
    with pytest.raises(InvalidRule):
        Rule(name="speed", producer=_two)


def test_arity_is_computed_once(monkeypatch: pytest.MonkeyPatch) -> None:
    rule = Rule(name="speed", producer=lambda attrs: attrs["weight"])

    def fail(*args, **kwargs):
        raise AssertionError("signature inspected again")

    monkeypatch.setattr(rules_module.inspect, "signature", fail)

    assert rule.arity == 1
    assert rule.produce({"weight": 3}) == 3


def test_rule_is_immutable() -> None:
    rule = Rule(name="age", producer=lambda: 5)

    with pytest.raises(ValidationError):
        rule.name = "weight"  # type: ignore[misc]
