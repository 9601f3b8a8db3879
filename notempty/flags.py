"""
Emptiness rule flags.

Each rule is one bit of a fixed-width mask. Members compare equal to their
legacy integer values, so ``EmptyType.STRING | EmptyType.ZERO == 24`` and a
plain ``int`` mask can be passed anywhere an ``EmptyType`` is expected.
"""

from __future__ import annotations

from enum import IntFlag


class EmptyType(IntFlag):
    """Meaningful emptiness rules.

    - BOOLEAN: ``False``
    - INTEGER: ``0``
    - FLOAT: ``0.0``
    - STRING: ``""``
    - ZERO: ``"0"``
    - EMPTY_ARRAY: ``[]``, ``()``, ``{}``
    - NULL: ``None``
    - PHP: native-falsy values (union of the seven rules above)
    - SPACE: whitespace-only strings
    - OBJECT: objects are never empty just for being objects
    - OBJECT_STRING: objects whose string conversion is ``""``
    - OBJECT_COUNT: objects whose ``len()`` is ``0``
    - ALL: every rule
    """

    BOOLEAN = 0x001
    INTEGER = 0x002
    FLOAT = 0x004
    STRING = 0x008
    ZERO = 0x010
    EMPTY_ARRAY = 0x020
    NULL = 0x040
    PHP = 0x07F
    SPACE = 0x080
    OBJECT = 0x100
    OBJECT_STRING = 0x200
    OBJECT_COUNT = 0x400
    ALL = 0x7FF


# Single-bit rules in ascending bit order (composites excluded).
SINGLE_RULES: tuple[EmptyType, ...] = (
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
)

# Lowercase rule name -> flag. Lookups are case-insensitive (see lookup_name).
TYPE_NAMES: dict[str, EmptyType] = {
    "boolean": EmptyType.BOOLEAN,
    "integer": EmptyType.INTEGER,
    "float": EmptyType.FLOAT,
    "string": EmptyType.STRING,
    "zero": EmptyType.ZERO,
    "array": EmptyType.EMPTY_ARRAY,
    "null": EmptyType.NULL,
    "php": EmptyType.PHP,
    "space": EmptyType.SPACE,
    "object": EmptyType.OBJECT,
    "objectstring": EmptyType.OBJECT_STRING,
    "objectcount": EmptyType.OBJECT_COUNT,
    "all": EmptyType.ALL,
}

DEFAULT_TYPE = (
    EmptyType.BOOLEAN
    | EmptyType.STRING
    | EmptyType.EMPTY_ARRAY
    | EmptyType.NULL
    | EmptyType.SPACE
    | EmptyType.OBJECT
)


def lookup_name(name: str) -> EmptyType | None:
    """Return the flag for a rule name, ignoring case and surrounding blanks."""
    return TYPE_NAMES.get(name.strip().lower())


def name_of(rule: EmptyType) -> str:
    """Return the configuration name of a single rule or composite."""
    for name, flag in TYPE_NAMES.items():
        if flag == rule:
            return name
    return str(int(rule))


def describe(mask: int) -> list[str]:
    """Names of the single-bit rules active in ``mask``, ascending."""
    return [name_of(rule) for rule in SINGLE_RULES if mask & rule]
