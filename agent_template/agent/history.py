"""Bounded step history kept by trainable agents."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Deque, Generic, Iterator, List, Optional, Tuple

from agent_template.agent.types import StepRecord, StepSnapshot, TInput, TOutput
from agent_template.utils.logging_config import get_logger

logger = get_logger(__name__, component="step_history")

DEFAULT_STEPS_BUFFER_SIZE = 128


class StepHistoryBuffer(Generic[TInput, TOutput]):
    """Bounded buffer that tracks the most recent agent steps.

    Appending past ``maxlen`` drops the oldest step. The most recent step is
    treated as still open and is withheld from
    :meth:`snapshot_excluding_last`.
    """

    def __init__(self, *, maxlen: int = DEFAULT_STEPS_BUFFER_SIZE) -> None:
        if maxlen < 1:
            raise ValueError(f"maxlen must be at least 1, got {maxlen}")
        self._buffer: Deque[StepRecord[TInput, TOutput]] = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int:
        return self._buffer.maxlen  # type: ignore[return-value]

    def append(self, step: StepRecord[TInput, TOutput]) -> None:
        if len(self._buffer) == self.maxlen:
            evicted = self._buffer[0]
            logger.debug(
                "step_evicted",
                maxlen=self.maxlen,
                reward=evicted.reward,
                is_terminal=evicted.is_terminal,
            )
        self._buffer.append(step)

    def latest(self) -> Optional[StepRecord[TInput, TOutput]]:
        """Return the most recently appended step, or ``None`` when empty."""

        if not self._buffer:
            return None
        return self._buffer[-1]

    def snapshot_excluding_last(self) -> Tuple[StepSnapshot[TInput, TOutput], ...]:
        """Return frozen copies of every step except the open one, oldest first."""

        if len(self._buffer) <= 1:
            return ()
        return tuple(
            step.snapshot() for step in islice(self._buffer, len(self._buffer) - 1)
        )

    def clear(self) -> None:
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[StepSnapshot[TInput, TOutput]]:
        return iter([step.snapshot() for step in self._buffer])

    def to_dict(self) -> List[dict]:
        """Return a JSON-friendly representation of the buffer."""

        return [step.snapshot().to_summary() for step in self._buffer]


__all__ = ["DEFAULT_STEPS_BUFFER_SIZE", "StepHistoryBuffer"]
