"""
Configuration for a single search invocation.

Run limits live on RunConstraints; this module holds the knobs that bound how much
work one search may do. A caller wanting a deadline passes it here, the engines
raise SearchBudgetExceededError once it is spent.
"""

from typing import Any, Dict, Optional

from ..exceptions import InvalidConfigurationError

# Constants
DEFAULT_MEMORY_CHECK_INTERVAL = 1000  # Work items between memory/timeout checks


class SearchSettings:
    """
    Configuration for search budgets.

    Attributes:
        timeout: Wall-clock limit in seconds, or None for no limit
        max_states: Maximum number of work items taken off the frontier, or None
        max_memory_mb: Memory growth limit in MB enforced through psutil, or None
        seed_bound: Whether branch-and-bound starts from the staircase estimate
        memory_check_interval: Work items between timeout and memory checks
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_states: Optional[int] = None,
        max_memory_mb: Optional[float] = None,
        seed_bound: bool = True,
        memory_check_interval: int = DEFAULT_MEMORY_CHECK_INTERVAL,
    ):
        if timeout is not None:
            if not isinstance(timeout, (int, float)) or isinstance(timeout, bool):
                raise InvalidConfigurationError("timeout must be a number")
            if timeout <= 0:
                raise InvalidConfigurationError("timeout must be positive")
        if max_states is not None:
            if not isinstance(max_states, int) or isinstance(max_states, bool):
                raise InvalidConfigurationError("max_states must be an integer")
            if max_states <= 0:
                raise InvalidConfigurationError("max_states must be positive")
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise InvalidConfigurationError("max_memory_mb must be positive")
        if not isinstance(memory_check_interval, int) or memory_check_interval <= 0:
            raise InvalidConfigurationError("memory_check_interval must be a positive integer")

        self.timeout = timeout
        self.max_states = max_states
        self.max_memory_mb = max_memory_mb
        self.seed_bound = seed_bound
        self.memory_check_interval = memory_check_interval

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timeout": self.timeout,
            "max_states": self.max_states,
            "max_memory_mb": self.max_memory_mb,
            "seed_bound": self.seed_bound,
            "memory_check_interval": self.memory_check_interval,
        }

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"SearchSettings({args})"
