"""Step records kept by trainable agents and the read-only views handed out."""

from __future__ import annotations

import copy
from typing import Any, Dict, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class StepSnapshot(BaseModel, Generic[TInput, TOutput]):
    """Frozen copy of a recorded step as seen by a training consumer.

    Observation and response are deep copies, so mutating them in place
    leaves the recorded step untouched.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    observation: TInput = Field(..., description="Input the agent responded to")
    response: TOutput = Field(..., description="Output produced by the policy")
    reward: float = Field(default=0.0, description="Total reward gained during this step")
    is_terminal: bool = Field(
        default=False, description="Whether the episode ended on this step"
    )

    def to_summary(self) -> Dict[str, Any]:
        """Return a plain mapping for logging or export."""

        return {
            "observation": self.observation,
            "response": self.response,
            "reward": self.reward,
            "is_terminal": self.is_terminal,
        }


class StepRecord(Generic[TInput, TOutput]):
    """One observe/respond interaction plus the reward it accumulated.

    Observation and response are fixed at creation. Reward accumulates until
    the step is marked terminal; after that ``add_reward`` is ignored.
    """

    __slots__ = ("_observation", "_response", "_reward", "_is_terminal")

    def __init__(self, observation: TInput, response: TOutput) -> None:
        self._observation = observation
        self._response = response
        self._reward = 0.0
        self._is_terminal = False

    @property
    def observation(self) -> TInput:
        return self._observation

    @property
    def response(self) -> TOutput:
        return self._response

    @property
    def reward(self) -> float:
        return self._reward

    @property
    def is_terminal(self) -> bool:
        """Was this the step before the episode ended?"""
        return self._is_terminal

    def add_reward(self, delta: float) -> bool:
        """Accumulate ``delta``; returns ``False`` when the step is already closed."""

        if self._is_terminal:
            return False
        self._reward += float(delta)
        return True

    def mark_terminal(self) -> None:
        self._is_terminal = True

    def snapshot(self) -> StepSnapshot[TInput, TOutput]:
        return StepSnapshot(
            observation=copy.deepcopy(self._observation),
            response=copy.deepcopy(self._response),
            reward=self._reward,
            is_terminal=self._is_terminal,
        )

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return (
            f"StepRecord(observation={self._observation!r}, response={self._response!r}, "
            f"reward={self._reward!r}, is_terminal={self._is_terminal!r})"
        )


__all__ = ["StepRecord", "StepSnapshot", "TInput", "TOutput"]
