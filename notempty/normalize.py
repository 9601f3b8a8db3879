"""
Rule selector normalization.

Turns any accepted selector notation into one canonical ``EmptyType`` mask:

- a rule name (``"boolean"``) or a single flag (``EmptyType.BOOLEAN``)
- an integer mask (``ZERO | STRING`` or ``ZERO + STRING``)
- a sequence mixing names and flags (``["zero", EmptyType.STRING]``)
- a mapping with a ``type`` entry holding any of the above. Config objects that
  are not ``Mapping`` subclasses but expose ``keys()`` and ``__getitem__`` are
  read as mappings too.

``None`` and mappings without ``type`` fall back to the default mask.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .errors import ConfigurationError
from .flags import DEFAULT_TYPE, EmptyType, describe, lookup_name

logger = logging.getLogger(__name__)

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _unknown(value: Any) -> ConfigurationError:
    return ConfigurationError(f"Unknown type: {value!r}")


def as_mapping(obj: Any) -> dict[str, Any] | None:
    """Copy a mapping or mapping-like config object into a dict; None otherwise."""
    if isinstance(obj, Mapping):
        return dict(obj.items())
    if isinstance(obj, (str, bytes)) or isinstance(obj, _SEQUENCE_TYPES):
        return None
    keys = getattr(obj, "keys", None)
    if callable(keys) and hasattr(type(obj), "__getitem__"):
        return {k: obj[k] for k in keys()}
    return None


def _flag_from_int(value: int) -> EmptyType:
    if value < 0 or value & ~int(EmptyType.ALL):
        raise _unknown(value)
    return EmptyType(value)


def _flag_from_scalar(value: Any) -> EmptyType:
    # bool is an int subclass; it is never a selector.
    if isinstance(value, bool):
        raise _unknown(value)
    if isinstance(value, int):
        return _flag_from_int(value)
    if isinstance(value, str):
        flag = lookup_name(value)
        if flag is None:
            raise _unknown(value)
        return flag
    raise _unknown(value)


def normalize(selector: Any = None) -> EmptyType:
    """Reduce a rule selector to its canonical mask.

    Raises:
        ConfigurationError: ``selector`` is not a known name, a valid mask, or a
            sequence/mapping of those.
    """
    if selector is None:
        return DEFAULT_TYPE

    mapping = as_mapping(selector)
    if mapping is not None:
        if "type" not in mapping:
            return DEFAULT_TYPE
        inner = mapping["type"]
        if as_mapping(inner) is not None:
            raise _unknown(inner)
        if inner is None:
            return DEFAULT_TYPE
        return normalize(inner)

    if isinstance(selector, _SEQUENCE_TYPES):
        mask = EmptyType(0)
        for item in selector:
            mask |= _flag_from_scalar(item)
        logger.debug("normalized %r to %s", selector, describe(mask))
        return mask

    return _flag_from_scalar(selector)


def extract_type(options: Any) -> tuple[Any, dict[str, Any]]:
    """Split constructor input into ``(selector, other_options)``.

    Mappings are option records: their ``type`` entry is the selector and the
    remaining keys are returned untouched. Any other shape is the selector
    itself. The caller's mapping is copied, never mutated.
    """
    if options is None:
        return None, {}
    mapping = as_mapping(options)
    if mapping is not None:
        rest = {str(k): v for k, v in mapping.items() if k != "type"}
        return mapping.get("type"), rest
    return options, {}
