"""Lazy attribute resolution so importing the package stays cheap."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Mapping


def make_getattr(module_name: str, mapping: Mapping[str, str]) -> Callable[[str], object]:
    """
    Create a module-level __getattr__ that imports exports on first access.

    Args:
        module_name: Name of the current module (for error messages).
        mapping: Export name -> dotted path of the module defining it.
    """
    if not mapping:
        raise ValueError("mapping must name at least one export")

    def __getattr__(name: str) -> object:
        if name in mapping:
            module = importlib.import_module(mapping[name])
            return getattr(module, name)
        raise AttributeError(f"module {module_name!r} has no attribute {name!r}")

    return __getattr__
