"""Tests for value classification, predicates and the evaluation order."""

from __future__ import annotations

from decimal import Decimal

from notempty.evaluator import INVALID, IS_EMPTY, NOT_EMPTY, evaluate, is_empty
from notempty.flags import EmptyType
from notempty.predicates import (
    PREDICATES,
    RULE_ORDER,
    Shape,
    classify,
    is_countable,
    is_stringable,
)
from values import Both, BrokenLen, Countable, Stringable


def test_classify_distinguishes_bool_from_int():
    assert classify(False) is Shape.BOOLEAN
    assert classify(0) is Shape.INTEGER
    assert classify(0.0) is Shape.FLOAT
    assert classify("") is Shape.STRING
    assert classify(None) is Shape.NULL


def test_classify_collections_and_objects():
    assert classify([]) is Shape.COLLECTION
    assert classify(()) is Shape.COLLECTION
    assert classify({}) is Shape.COLLECTION
    assert classify(set()) is Shape.OBJECT
    assert classify(object()) is Shape.OBJECT
    assert classify(Decimal("0")) is Shape.OBJECT


def test_capability_probes():
    assert is_countable(Countable(1))
    assert not is_countable(Stringable("x"))
    assert is_stringable(Stringable("x"))
    assert not is_stringable(Countable(1))
    assert not is_stringable(object())


def test_rule_order_puts_object_count_before_object_string():
    rules = [check.rule for check in RULE_ORDER]
    assert rules.index(EmptyType.OBJECT_COUNT) < rules.index(EmptyType.OBJECT_STRING) < rules.index(EmptyType.OBJECT)
    assert rules[0] == EmptyType.EMPTY_ARRAY


def test_every_single_rule_has_a_predicate():
    assert set(PREDICATES) == {
        EmptyType.BOOLEAN,
        EmptyType.INTEGER,
        EmptyType.FLOAT,
        EmptyType.STRING,
        EmptyType.ZERO,
        EmptyType.EMPTY_ARRAY,
        EmptyType.NULL,
        EmptyType.SPACE,
        EmptyType.OBJECT,
        EmptyType.OBJECT_STRING,
        EmptyType.OBJECT_COUNT,
    }


def test_verdict_records_deciding_rule():
    verdict = evaluate("0", EmptyType.ZERO | EmptyType.STRING)
    assert verdict.empty
    assert verdict.rule == EmptyType.ZERO
    assert verdict.reason == IS_EMPTY
    assert not verdict.valid


def test_not_empty_verdict():
    assert evaluate("abc", EmptyType.ALL) == NOT_EMPTY
    assert evaluate("abc", EmptyType.ALL).valid


def test_collections_are_opaque_to_scalar_rules():
    mask = EmptyType.ALL & ~EmptyType.EMPTY_ARRAY
    assert not is_empty([], mask)
    assert not is_empty({}, mask)
    assert is_empty([], EmptyType.EMPTY_ARRAY)


def test_objects_without_object_rules_are_not_empty():
    assert not is_empty(Stringable(""), EmptyType.PHP | EmptyType.SPACE)
    assert not is_empty(Countable(0), EmptyType.PHP)


def test_object_rules_resolve_ambiguity():
    both = Both(3, "")
    # Non-empty as a count, empty as a string.
    assert not is_empty(both, EmptyType.OBJECT_COUNT)
    verdict = evaluate(both, EmptyType.OBJECT_COUNT | EmptyType.OBJECT_STRING)
    assert verdict.empty
    assert verdict.rule == EmptyType.OBJECT_STRING


def test_broken_capability_is_invalid():
    verdict = evaluate(BrokenLen(), EmptyType.OBJECT_COUNT)
    assert verdict.empty
    assert verdict.reason == INVALID
    assert verdict.rule == EmptyType.OBJECT_COUNT


def test_broken_capability_ignored_when_rule_inactive():
    assert not is_empty(BrokenLen(), EmptyType.OBJECT | EmptyType.OBJECT_STRING)


def test_negative_zero_float_is_empty():
    assert is_empty(-0.0, EmptyType.FLOAT)


def test_space_rule_needs_at_least_one_character():
    assert not is_empty("", EmptyType.SPACE)
    assert is_empty(" \t\r\n", EmptyType.SPACE)
    assert not is_empty(" x ", EmptyType.SPACE)


def test_empty_mask_never_empty():
    for value in (None, "", 0, False, [], Countable(0)):
        assert not is_empty(value, 0)
