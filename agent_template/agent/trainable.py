"""Agent decorator that records steps for training."""

from __future__ import annotations

from typing import Optional, Tuple

from agent_template.agent.base import AgentExtender, BaseAgent, BaseTrainableAgent
from agent_template.agent.config import AgentSettings
from agent_template.agent.history import StepHistoryBuffer
from agent_template.agent.types import StepRecord, StepSnapshot, TInput, TOutput
from agent_template.utils.logging_config import get_logger

logger = get_logger(__name__, component="trainable_agent")


class TrainableAgent(AgentExtender[TInput, TOutput], BaseTrainableAgent[TInput, TOutput]):
    """Wraps an agent and keeps a bounded history of its steps.

    Every :meth:`respond` records a new open step. Rewards and the end of an
    episode always apply to the latest step, so callers must send them before
    asking for the next response. :meth:`get_taken_steps` withholds the latest
    step because its reward is not settled yet.

    Calls to :meth:`add_reward` and :meth:`end_episode` are forwarded to the
    inner agent as well, which lets trainable agents be nested.
    """

    def __init__(
        self,
        agent: BaseAgent[TInput, TOutput],
        steps_buffer_size: Optional[int] = None,
        *,
        settings: Optional[AgentSettings] = None,
    ) -> None:
        """
        Args:
            agent: The agent to be trained
            steps_buffer_size: Maximum number of steps to keep in memory.
                Defaults to ``settings.steps_buffer_size``.
            settings: Optional settings; ``AgentSettings()`` when omitted
        """
        super().__init__(agent)
        if steps_buffer_size is None:
            steps_buffer_size = (settings or AgentSettings()).steps_buffer_size
        self._steps: StepHistoryBuffer[TInput, TOutput] = StepHistoryBuffer(
            maxlen=steps_buffer_size
        )
        logger.debug(
            "trainable_agent_initialized",
            inner=type(agent).__name__,
            steps_buffer_size=steps_buffer_size,
        )

    @property
    def steps_buffer_size(self) -> int:
        return self._steps.maxlen

    def respond(self, observation: TInput) -> TOutput:
        """Get the inner agent's response and record it as a new step."""

        response = super().respond(observation)
        self._steps.append(StepRecord(observation, response))
        logger.debug("step_recorded", steps=len(self._steps))
        return response

    def add_reward(self, reward: float) -> None:
        """Add reward to the current step."""

        super().add_reward(reward)
        step = self._steps.latest()
        if step is None:
            logger.debug("reward_ignored_no_steps", reward=reward)
            return
        if step.add_reward(reward):
            logger.debug("reward_applied", reward=reward, total=step.reward)
        else:
            logger.debug("reward_ignored_terminal_step", reward=reward)

    def end_episode(self) -> None:
        """Mark the current step as the last one of the episode."""

        super().end_episode()
        step = self._steps.latest()
        if step is None:
            logger.debug("episode_end_ignored_no_steps")
            return
        step.mark_terminal()
        logger.debug("episode_ended", reward=step.reward)

    def get_taken_steps(self) -> Tuple[StepSnapshot[TInput, TOutput], ...]:
        """Return the settled steps in memory, oldest first."""

        return self._steps.snapshot_excluding_last()

    def reset_steps(self) -> None:
        """Forget every recorded step."""

        self._steps.clear()
        logger.info("steps_reset", steps_buffer_size=self.steps_buffer_size)


__all__ = ["TrainableAgent"]
