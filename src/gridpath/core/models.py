"""
Core domain models for run-constrained path search.

This module provides the data structures shared by the estimator and the search
engines:
- RunConstraints: minimum and maximum straight-run lengths of the agent
- SearchState: position, heading and current run length of the agent

Two named configurations are provided:
- STANDARD: turn after at least 1 step, at most 3 steps in a row
- EXTENDED: turn after at least 4 steps, at most 10 steps in a row
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .enums import Heading
from .exceptions import InvalidConfigurationError

Position = Tuple[int, int]


@dataclass(frozen=True)
class RunConstraints:
    """
    Directional-run limits of the travelling agent.

    Attributes:
        min_run: Steps the agent must take in a heading before it may turn
        max_run: Steps the agent may take in a heading before it must turn
        name: Label used in logs and CLI output

    Example:
        >>> RunConstraints(min_run=2, max_run=5).can_turn(1)
        False
    """

    min_run: int
    max_run: int
    name: str = "custom"

    def __post_init__(self):
        """Validate run limits."""
        for field_name in ("min_run", "max_run"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfigurationError(f"{field_name} must be an integer")
            if value <= 0:
                raise InvalidConfigurationError(f"{field_name} must be positive, got {value}")
        if self.min_run > self.max_run:
            raise InvalidConfigurationError(
                f"min_run {self.min_run} cannot exceed max_run {self.max_run}"
            )

    def can_continue(self, run_length: int) -> bool:
        """Return True if one more straight step keeps the run within max_run."""
        return run_length < self.max_run

    def can_turn(self, run_length: int) -> bool:
        """Return True if the current run is long enough to turn away from."""
        return run_length >= self.min_run

    @classmethod
    def from_name(cls, name: str) -> "RunConstraints":
        """
        Get a named configuration.

        Raises:
            InvalidConfigurationError: If the name is unknown
        """
        try:
            return NAMED_CONSTRAINTS[name.lower()]
        except (KeyError, AttributeError):
            known = ", ".join(sorted(NAMED_CONSTRAINTS))
            raise InvalidConfigurationError(
                f"unknown run configuration {name!r}; expected one of: {known}"
            )


STANDARD = RunConstraints(min_run=1, max_run=3, name="standard")
EXTENDED = RunConstraints(min_run=4, max_run=10, name="extended")

NAMED_CONSTRAINTS: Dict[str, RunConstraints] = {
    STANDARD.name: STANDARD,
    EXTENDED.name: EXTENDED,
}


@dataclass(frozen=True, slots=True)
class SearchState:
    """
    Memory-efficient immutable search state.

    Attributes:
        position: Cell the agent stands on
        heading: Heading of the last step
        run_length: Consecutive steps taken in ``heading`` since the last turn
    """

    position: Position
    heading: Heading
    run_length: int

    def advance(self, heading: Heading) -> "SearchState":
        """State after one step in ``heading``; legality is the caller's concern."""
        run_length = self.run_length + 1 if heading is self.heading else 1
        return SearchState(heading.step(self.position), heading, run_length)
