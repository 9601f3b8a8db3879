"""
Emptiness evaluation.

Walks ``RULE_ORDER`` for the rules active in a mask and stops at the first
predicate that reports the value as empty. A value no active rule applies to is
not empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .flags import EmptyType, name_of
from .predicates import RULE_ORDER, CapabilityError, classify

logger = logging.getLogger(__name__)

IS_EMPTY = "isEmpty"
INVALID = "notEmptyInvalid"


@dataclass(frozen=True)
class Verdict:
    """Outcome of one evaluation.

    ``rule`` is the deciding rule when the value is empty; ``reason`` is the
    symbolic failure key (``isEmpty`` or ``notEmptyInvalid``).
    """

    empty: bool
    rule: EmptyType | None = None
    reason: str | None = None

    @property
    def valid(self) -> bool:
        return not self.empty


NOT_EMPTY = Verdict(empty=False)


def evaluate(value: Any, mask: int) -> Verdict:
    shape = classify(value)
    for check in RULE_ORDER:
        if not check.applies(mask, shape):
            continue
        try:
            hit = check.predicate(value)
        except CapabilityError as e:
            logger.debug("cannot evaluate %s value: %s", shape.value, e)
            return Verdict(empty=True, rule=check.rule, reason=INVALID)
        if hit:
            logger.debug("%s value is empty under rule %s", shape.value, name_of(check.rule))
            return Verdict(empty=True, rule=check.rule, reason=IS_EMPTY)
    return NOT_EMPTY


def is_empty(value: Any, mask: int) -> bool:
    """True if ``value`` counts as empty under the rules active in ``mask``."""
    return evaluate(value, mask).empty
