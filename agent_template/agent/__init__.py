"""Agents that respond to observations and, optionally, record steps for training.

:class:`Agent` wraps a plain policy callable. :class:`TrainableAgent` decorates
any :class:`BaseAgent` and keeps a bounded history of observe/respond steps,
with rewards and episode ends attributed to the most recent step. A training
process reads the settled steps through
:meth:`TrainableAgent.get_taken_steps`.
"""

from agent_template.agent.base import Agent, AgentExtender, BaseAgent, BaseTrainableAgent
from agent_template.agent.config import AgentSettings
from agent_template.agent.history import DEFAULT_STEPS_BUFFER_SIZE, StepHistoryBuffer
from agent_template.agent.trainable import TrainableAgent
from agent_template.agent.types import StepRecord, StepSnapshot

__all__ = [
    "Agent",
    "AgentExtender",
    "AgentSettings",
    "BaseAgent",
    "BaseTrainableAgent",
    "DEFAULT_STEPS_BUFFER_SIZE",
    "StepHistoryBuffer",
    "StepRecord",
    "StepSnapshot",
    "TrainableAgent",
]
