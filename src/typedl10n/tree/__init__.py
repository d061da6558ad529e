"""Compiled translation tree.

Model types, the multi-locale builder, and template materialization.

Python 3.13+.
"""

from .builder import build_module, build_namespaced_module, value_type_name
from .materialize import materialize
from .model import Interpolation, Key, LocaleCode, Message, Module, Translation

__all__ = [
    "Interpolation",
    "Key",
    "LocaleCode",
    "Message",
    "Module",
    "Translation",
    "build_module",
    "build_namespaced_module",
    "materialize",
    "value_type_name",
]
