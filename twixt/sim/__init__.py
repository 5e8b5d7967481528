"""Simulation headless."""

from .runner import HeadlessEnv, StepResult, play_episode

__all__ = ["HeadlessEnv", "StepResult", "play_episode"]
