"""
NotEmpty validator.

Holds one rule mask and the failure messages of the most recent ``is_valid``
call. Instances are not thread-safe: ``is_valid`` rewrites the message record.

    validator = NotEmpty(["zero", "string"])
    validator.is_valid("0")      # False
    validator.get_messages()     # {"isEmpty": "Value is required and can't be empty"}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import ConfigurationError
from .evaluator import INVALID, IS_EMPTY, NOT_EMPTY, Verdict, evaluate
from .flags import DEFAULT_TYPE, EmptyType, describe
from .normalize import extract_type, normalize

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATES: dict[str, str] = {
    IS_EMPTY: "Value is required and can't be empty",
    INVALID: "Invalid type given. String, integer, float, boolean or array expected",
}

# Option keys as they appear in foreign (camelCase) configs.
_OPTION_ALIASES: dict[str, str] = {
    "messageTemplates": "message_templates",
    "valueObscured": "value_obscured",
}


def _option_key(name: str) -> str:
    return _OPTION_ALIASES.get(name, name)


def _is_blank(selector: Any) -> bool:
    """No selector, or an empty sequence: keep the default rule set."""
    if selector is None:
        return True
    return isinstance(selector, (list, tuple, set, frozenset)) and not selector


class NotEmpty:
    """Validator that fails for values considered empty."""

    BOOLEAN = EmptyType.BOOLEAN
    INTEGER = EmptyType.INTEGER
    FLOAT = EmptyType.FLOAT
    STRING = EmptyType.STRING
    ZERO = EmptyType.ZERO
    EMPTY_ARRAY = EmptyType.EMPTY_ARRAY
    NULL = EmptyType.NULL
    PHP = EmptyType.PHP
    SPACE = EmptyType.SPACE
    OBJECT = EmptyType.OBJECT
    OBJECT_STRING = EmptyType.OBJECT_STRING
    OBJECT_COUNT = EmptyType.OBJECT_COUNT
    ALL = EmptyType.ALL

    def __init__(self, options: Any = None, **kwargs: Any):
        """
        Args:
            options: A rule selector (name, flag, mask or sequence of those) or
                an options mapping whose ``type`` entry is the selector.
            **kwargs: Extra options, merged over the mapping form.

        Raises:
            ConfigurationError: The selector or an option is malformed.
        """
        self._type: EmptyType = DEFAULT_TYPE
        self._messages: dict[str, str] = {}
        self._message_overrides: dict[str, str] = {}
        self._value: Any = None
        self._verdict: Verdict = NOT_EMPTY
        self._value_obscured = False
        self._options: dict[str, Any] = {}

        selector, rest = extract_type(options)
        rest.update(kwargs)
        if "type" in rest:
            selector = rest.pop("type")
        self.set_options(rest)

        if not _is_blank(selector):
            self.set_type(selector)

    @classmethod
    def from_config(cls, path: str | Path) -> NotEmpty:
        """Build a validator from a TOML options file (see ``config.load_options``)."""
        from .config import load_options

        return cls(load_options(path))

    # ------------------------------------------------------------------
    # Rule set
    # ------------------------------------------------------------------

    def get_type(self) -> EmptyType:
        return self._type

    def get_default_type(self) -> EmptyType:
        return DEFAULT_TYPE

    def set_type(self, selector: Any) -> NotEmpty:
        """Replace the rule mask with the normalized form of ``selector``."""
        self._type = normalize(selector)
        logger.debug("rule set: %s", describe(self._type))
        return self

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def set_options(self, options: dict[str, Any]) -> NotEmpty:
        for name, value in options.items():
            self.set_option(name, value)
        return self

    def set_option(self, name: str, value: Any) -> NotEmpty:
        key = _option_key(name)
        if key == "type":
            return self.set_type(value)
        if key == "message_templates":
            raise ConfigurationError("message_templates is read-only; use set_message()")
        if key == "messages":
            if not isinstance(value, Mapping):
                raise ConfigurationError(f"messages must be a mapping, got {type(value).__name__}")
            for message_key, message in value.items():
                self.set_message(message, message_key)
            return self
        if key == "value_obscured":
            self._value_obscured = bool(value)
            return self
        # Options owned by other layers (translator, etc.) are kept verbatim.
        self._options[key] = value
        return self

    def get_option(self, name: str) -> Any:
        key = _option_key(name)
        if key == "message_templates":
            return dict(MESSAGE_TEMPLATES)
        if key == "messages":
            return dict(self._message_overrides)
        if key == "type":
            return self._type
        if key == "value_obscured":
            return self._value_obscured
        if key in self._options:
            return self._options[key]
        raise ConfigurationError(f"Unknown option: {name!r}")

    def get_options(self) -> dict[str, Any]:
        options = dict(self._options)
        options["type"] = self._type
        options["message_templates"] = dict(MESSAGE_TEMPLATES)
        options["messages"] = dict(self._message_overrides)
        options["value_obscured"] = self._value_obscured
        return options

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def set_message(self, message: str, key: str | None = None) -> NotEmpty:
        """Override one message template, or all of them when ``key`` is None."""
        if key is None:
            for template_key in MESSAGE_TEMPLATES:
                self._message_overrides[template_key] = message
            return self
        if key not in MESSAGE_TEMPLATES:
            raise ConfigurationError(f"No message template exists for key {key!r}")
        self._message_overrides[key] = message
        return self

    def get_messages(self) -> dict[str, str]:
        return dict(self._messages)

    def get_value(self) -> Any:
        return self._value

    def get_verdict(self) -> Verdict:
        """Verdict of the most recent ``is_valid`` call, including the deciding rule."""
        return self._verdict

    def _render(self, key: str) -> str:
        template = self._message_overrides.get(key, MESSAGE_TEMPLATES[key])
        if "%value%" not in template:
            return template
        try:
            shown = "" if self._value is None else str(self._value)
        except Exception:
            shown = type(self._value).__name__
        if self._value_obscured:
            shown = "*" * len(shown)
        return template.replace("%value%", shown)

    def _error(self, key: str) -> None:
        self._messages[key] = self._render(key)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def is_valid(self, value: Any) -> bool:
        """True if ``value`` is not empty under the current rule set."""
        self._messages = {}
        self._value = value

        verdict = self._verdict = evaluate(value, self._type)
        if verdict.empty:
            self._error(verdict.reason or IS_EMPTY)
            return False
        return True

    def __call__(self, value: Any) -> bool:
        return self.is_valid(value)

    def __repr__(self) -> str:
        return f"NotEmpty(type={describe(self._type)!r})"
