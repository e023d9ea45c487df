"""Runtime settings for trainable agents."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

from agent_template.agent.history import DEFAULT_STEPS_BUFFER_SIZE

_STEPS_BUFFER_SIZE_ENV = "AGENT_STEPS_BUFFER_SIZE"


class AgentSettings(BaseModel):
    """Validated configuration for :class:`~agent_template.agent.trainable.TrainableAgent`."""

    model_config = ConfigDict(frozen=True)

    steps_buffer_size: int = Field(
        default=DEFAULT_STEPS_BUFFER_SIZE,
        ge=1,
        description="Maximum number of steps kept in memory for training",
    )

    @classmethod
    def from_env(cls) -> "AgentSettings":
        """Build settings from ``AGENT_STEPS_BUFFER_SIZE``, falling back to defaults."""

        value = os.getenv(_STEPS_BUFFER_SIZE_ENV, "").strip()
        if not value:
            return cls()
        return cls(steps_buffer_size=value)


__all__ = ["AgentSettings"]
