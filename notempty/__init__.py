"""notempty - configurable emptiness validation."""

from .errors import ConfigurationError
from .evaluator import Verdict, evaluate, is_empty
from .flags import DEFAULT_TYPE, EmptyType
from .normalize import normalize
from .validator import MESSAGE_TEMPLATES, NotEmpty

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DEFAULT_TYPE",
    "EmptyType",
    "MESSAGE_TEMPLATES",
    "NotEmpty",
    "Verdict",
    "evaluate",
    "is_empty",
    "normalize",
]
