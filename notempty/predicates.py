"""
Per-rule emptiness predicates.

Predicates are plain functions of the value; which of them may run for a given
value is decided by its ``Shape``. ``RULE_ORDER`` is the dispatch table the
evaluator walks: collection rule first, then object rules by priority, then
scalar rules.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .flags import EmptyType


class Shape(str, Enum):
    """Runtime shape of a value, as seen by the rules."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    NULL = "null"
    COLLECTION = "collection"
    OBJECT = "object"


_COLLECTION_TYPES = (list, tuple, dict)

_WHITESPACE_RE = re.compile(r"\s+")


class CapabilityError(Exception):
    """An object's ``__len__`` or ``__str__`` failed while being probed."""


def classify(value: Any) -> Shape:
    if value is None:
        return Shape.NULL
    # bool before int: True/False are ints too.
    if isinstance(value, bool):
        return Shape.BOOLEAN
    if isinstance(value, int):
        return Shape.INTEGER
    if isinstance(value, float):
        return Shape.FLOAT
    if isinstance(value, str):
        return Shape.STRING
    if isinstance(value, _COLLECTION_TYPES):
        return Shape.COLLECTION
    return Shape.OBJECT


def is_countable(obj: Any) -> bool:
    """True when the object's type reports a size through ``len()``."""
    return hasattr(type(obj), "__len__")


def is_stringable(obj: Any) -> bool:
    """True when the object's type defines its own string conversion."""
    return type(obj).__str__ is not object.__str__


def _count(obj: Any) -> int:
    try:
        return len(obj)
    except Exception as e:
        raise CapabilityError(f"len() failed for {type(obj).__name__}: {e}") from e


def _as_string(obj: Any) -> str:
    try:
        return str(obj)
    except Exception as e:
        raise CapabilityError(f"str() failed for {type(obj).__name__}: {e}") from e


# ============================================================================
# PREDICATES
# ============================================================================


def predicate_boolean(value: bool) -> bool:
    return value is False


def predicate_integer(value: int) -> bool:
    return value == 0


def predicate_float(value: float) -> bool:
    return value == 0.0


def predicate_string(value: str) -> bool:
    return value == ""


def predicate_zero(value: str) -> bool:
    return value == "0"


def predicate_space(value: str) -> bool:
    return _WHITESPACE_RE.fullmatch(value) is not None


def predicate_null(value: Any) -> bool:
    return value is None


def predicate_empty_array(value: list | tuple | dict) -> bool:
    return len(value) == 0


def predicate_object_count(obj: Any) -> bool:
    """Empty when a countable object has no elements; other objects pass."""
    if not is_countable(obj):
        return False
    return _count(obj) == 0


def predicate_object_string(obj: Any) -> bool:
    """Empty when a stringable object converts to ``""``; other objects pass."""
    if not is_stringable(obj):
        return False
    return _as_string(obj) == ""


def predicate_object(obj: Any) -> bool:
    return False


PredicateFn = Callable[[Any], bool]


@dataclass(frozen=True)
class RuleCheck:
    rule: EmptyType
    shapes: frozenset[Shape]
    predicate: PredicateFn

    def applies(self, mask: int, shape: Shape) -> bool:
        return bool(mask & self.rule) and shape in self.shapes


def _check(rule: EmptyType, shapes: tuple[Shape, ...], predicate: PredicateFn) -> RuleCheck:
    return RuleCheck(rule=rule, shapes=frozenset(shapes), predicate=predicate)


RULE_ORDER: tuple[RuleCheck, ...] = (
    _check(EmptyType.EMPTY_ARRAY, (Shape.COLLECTION,), predicate_empty_array),
    _check(EmptyType.OBJECT_COUNT, (Shape.OBJECT,), predicate_object_count),
    _check(EmptyType.OBJECT_STRING, (Shape.OBJECT,), predicate_object_string),
    _check(EmptyType.OBJECT, (Shape.OBJECT,), predicate_object),
    _check(EmptyType.SPACE, (Shape.STRING,), predicate_space),
    _check(EmptyType.NULL, (Shape.NULL,), predicate_null),
    _check(EmptyType.ZERO, (Shape.STRING,), predicate_zero),
    _check(EmptyType.STRING, (Shape.STRING,), predicate_string),
    _check(EmptyType.FLOAT, (Shape.FLOAT,), predicate_float),
    _check(EmptyType.INTEGER, (Shape.INTEGER,), predicate_integer),
    _check(EmptyType.BOOLEAN, (Shape.BOOLEAN,), predicate_boolean),
)

PREDICATES: dict[EmptyType, PredicateFn] = {check.rule: check.predicate for check in RULE_ORDER}
