"""
Custom exceptions for the run-constrained path search system.

This module defines the hierarchy of custom exceptions used throughout the package
to handle various error conditions in a structured and meaningful way. Each exception
type corresponds to a specific category of errors that may occur while reading a grid,
configuring a search or running one.
"""


class ValidationError(Exception):
    """
    Raised when input data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as grid text containing foreign characters or rows of different
    widths.

    Examples:
        * Non-digit characters in grid text
        * Jagged rows
        * Grids smaller than 2x2
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class MalformedGridError(ValidationError):
    """
    Raised when grid text or grid rows cannot be turned into a Grid.

    This exception is a specialized version of ValidationError for grid parsing.
    It is never recovered from inside the package and is surfaced to the caller.

    Examples:
        * Letter or punctuation inside a row
        * Row length differing from the first row
        * Empty input
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    This exception is raised when search configuration issues are detected,
    such as unknown configuration names or out-of-range settings.

    Examples:
        * Unknown named run configuration
        * Negative timeout
        * Non-integer state budget
    """


class InvalidConfigurationError(ConfigurationError):
    """
    Raised when run constraints cannot describe a legal agent.

    Examples:
        * min_run greater than max_run
        * min_run or max_run lower than one
        * Unknown configuration name
    """


class SearchError(Exception):
    """
    Raised when a path search fails.

    This exception is raised when a search over the grid state space cannot
    produce a result, either because the target is unreachable under the run
    constraints or because the search ran out of its budget.

    Examples:
        * Target unreachable under the constraints
        * Timeout exceeded
        * Expanded-state budget exhausted
    """

    def __str__(self) -> str:
        """Format search error message."""
        return f"Search Error: {super().__str__()}"


class NoPathFoundError(SearchError):
    """
    Raised when no constraint-respecting path reaches the target cell.

    Only degenerate grids trigger this, e.g. the extended configuration on a grid
    too small for any turn to complete its minimum run.
    """


class SearchBudgetExceededError(SearchError):
    """
    Raised when a search exceeds its configured budget.

    Examples:
        * Wall-clock timeout reached
        * More states expanded than max_states allows
    """
