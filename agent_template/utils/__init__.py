"""Lazy utility exports to keep import of the package lightweight."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "configure_logging",
    "get_logger",
]

_LAZY_EXPORTS = {
    "configure_logging": ("agent_template.utils.logging_config", "configure_logging"),
    "get_logger": ("agent_template.utils.logging_config", "get_logger"),
}


def __getattr__(name: str) -> Any:
    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module 'agent_template.utils' has no attribute '{name}'")
    module_name, attr = _LAZY_EXPORTS[name]
    module = import_module(module_name)
    value = getattr(module, attr)
    globals()[name] = value
    return value
