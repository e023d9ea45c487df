"""Agent interfaces plus the plain and delegating implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Tuple

from agent_template.agent.types import StepSnapshot, TInput, TOutput


class BaseAgent(ABC, Generic[TInput, TOutput]):
    """Base interface for agents that respond to observations."""

    @abstractmethod
    def respond(self, observation: TInput) -> TOutput:
        """Return the agent's response to ``observation``."""

    @abstractmethod
    def add_reward(self, reward: float) -> None:
        """Attribute ``reward`` to the most recent response."""

    @abstractmethod
    def end_episode(self) -> None:
        """Signal that the current episode is over."""


class BaseTrainableAgent(BaseAgent[TInput, TOutput]):
    """Agent that records its steps for a training process."""

    @abstractmethod
    def get_taken_steps(self) -> Tuple[StepSnapshot[TInput, TOutput], ...]:
        """Return settled steps in temporal order, excluding the open one."""


class Agent(BaseAgent[TInput, TOutput]):
    """Agent backed by a policy callable mapping observation to response."""

    def __init__(self, policy: Callable[[TInput], TOutput]) -> None:
        if not callable(policy):
            raise TypeError(f"policy must be callable, got {type(policy)!r}")
        self._policy = policy

    def respond(self, observation: TInput) -> TOutput:
        return self._policy(observation)

    def add_reward(self, reward: float) -> None:
        """Does nothing since this is not a trainable agent."""

    def end_episode(self) -> None:
        """Does nothing since this is not a trainable agent."""


class AgentExtender(BaseAgent[TInput, TOutput]):
    """Forwards every call to an inner agent; subclass to add behaviour."""

    def __init__(self, agent: BaseAgent[TInput, TOutput]) -> None:
        if not isinstance(agent, BaseAgent):
            raise TypeError(f"agent must be a BaseAgent, got {type(agent)!r}")
        self._agent = agent

    @property
    def inner(self) -> BaseAgent[TInput, TOutput]:
        return self._agent

    def respond(self, observation: TInput) -> TOutput:
        return self._agent.respond(observation)

    def add_reward(self, reward: float) -> None:
        self._agent.add_reward(reward)

    def end_episode(self) -> None:
        self._agent.end_episode()


__all__ = ["Agent", "AgentExtender", "BaseAgent", "BaseTrainableAgent"]
