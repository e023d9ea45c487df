"""Minimal trainable agent demo driven by a toy counting game."""

from __future__ import annotations

import argparse
import random
from typing import List, Tuple

from agent_template.agent import Agent, AgentSettings, StepSnapshot, TrainableAgent
from agent_template.utils.logging_config import configure_logging


def guess_policy(observation: int) -> int:
    """Guess the next number in the sequence, wrong on every fifth call."""

    return observation + 1 if observation % 5 else observation


def run_episodes(
    agent: TrainableAgent[int, int],
    *,
    episodes: int,
    steps_per_episode: int,
    rng: random.Random,
) -> None:
    for _ in range(episodes):
        observation = rng.randint(0, 100)
        for step in range(steps_per_episode):
            response = agent.respond(observation)
            agent.add_reward(1.0 if response == observation + 1 else -1.0)
            if step == steps_per_episode - 1:
                agent.end_episode()
            observation = response


def summarize(steps: Tuple[StepSnapshot[int, int], ...]) -> List[str]:
    lines = []
    for idx, step in enumerate(steps):
        marker = " [terminal]" if step.is_terminal else ""
        lines.append(
            f"{idx:3d}: obs={step.observation} response={step.response} "
            f"reward={step.reward:+.1f}{marker}"
        )
    return lines


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the trainable agent quick-start demo.")
    parser.add_argument(
        "--episodes",
        type=int,
        default=3,
        help="Number of episodes to play.",
    )
    parser.add_argument(
        "--steps-per-episode",
        type=int,
        default=4,
        help="Responses requested per episode.",
    )
    parser.add_argument(
        "--buffer-size",
        type=int,
        default=None,
        help="Steps kept in memory. Defaults to AGENT_STEPS_BUFFER_SIZE or 128.",
    )
    parser.add_argument("--seed", type=int, default=0, help="Random seed for start values.")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level override (AGENT_LOG_LEVEL otherwise).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level)

    settings = AgentSettings.from_env()
    agent = TrainableAgent(Agent(guess_policy), args.buffer_size, settings=settings)
    run_episodes(
        agent,
        episodes=args.episodes,
        steps_per_episode=args.steps_per_episode,
        rng=random.Random(args.seed),
    )

    steps = agent.get_taken_steps()
    print(f"Settled steps: {len(steps)} (buffer size {agent.steps_buffer_size})")
    for line in summarize(steps):
        print(line)


if __name__ == "__main__":
    main()
