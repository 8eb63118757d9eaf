"""Core grid, run-constraint and search functionality."""

from .enums import Heading
from .exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
    MalformedGridError,
    NoPathFoundError,
    SearchBudgetExceededError,
    SearchError,
    ValidationError,
)
from .grid import Grid, parse_grid
from .models import EXTENDED, NAMED_CONSTRAINTS, STANDARD, RunConstraints, SearchState

__all__ = [
    "ConfigurationError",
    "EXTENDED",
    "Grid",
    "Heading",
    "InvalidConfigurationError",
    "MalformedGridError",
    "NAMED_CONSTRAINTS",
    "NoPathFoundError",
    "RunConstraints",
    "STANDARD",
    "SearchBudgetExceededError",
    "SearchError",
    "SearchState",
    "ValidationError",
    "parse_grid",
]
