"""Agent template public interface."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

_AGENT_EXPORTS = {
    "Agent",
    "AgentExtender",
    "AgentSettings",
    "BaseAgent",
    "BaseTrainableAgent",
    "StepHistoryBuffer",
    "StepSnapshot",
    "TrainableAgent",
}

__all__ = ["__version__", *_AGENT_EXPORTS]


def __getattr__(name: str) -> Any:
    """Import agent classes on first access.

    Keeps ``import agent_template`` free of pydantic and structlog so the
    version can be read without importing them.
    """

    if name in _AGENT_EXPORTS:
        agent = import_module("agent_template.agent")
        value = getattr(agent, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'agent_template' has no attribute '{name}'")
