"""Core pieces shared by the whole package: configuration, errors, logging."""

from .config import PortionConfig, Strategy
from .exceptions import (
    ParameterError,
    PortionError,
    TypeMismatchError,
    UnsupportedKindError,
)

__all__ = [
    "PortionConfig",
    "Strategy",
    "PortionError",
    "ParameterError",
    "TypeMismatchError",
    "UnsupportedKindError",
]
