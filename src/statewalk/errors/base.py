"""Custom exception hierarchy for statewalk.

Every failure in statewalk is a validation or logic error raised at the
point of detection. Nothing is retried and nothing is recovered inside the
library; callers decide whether a given error is expected.

All statewalk errors inherit from StateWalkError and include:
- error_code: A unique ErrorCode enum for categorization
- context: ErrorContext with state/action/source details
- suggestions: List of actionable steps to resolve the issue

Example:
    try:
        machine.random_walk("LOGGED_OUT", 2)
    except StepLimitTooLowError as e:
        print(f"Error: {e}")
        print(f"Suggestions: {e.suggestions}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for statewalk.

    Error codes are organized by category:
    - E1xx: Tabular input errors
    - E2xx: Model construction errors
    - E3xx: Action dispatch errors
    - E4xx: Walk generation errors
    - E5xx: Graph export errors
    - E6xx: SUT driver errors
    - E7xx: Configuration errors
    - E9xx: Unknown/internal errors
    """

    # Input errors (E1xx)
    MISSING_SOURCE = "E101"
    EMPTY_INPUT = "E102"
    INSUFFICIENT_DATA = "E103"
    UNKNOWN_LAYOUT = "E104"

    # Model construction errors (E2xx)
    UNKNOWN_ACTION = "E201"

    # Dispatch errors (E3xx)
    ACTION_NOT_AVAILABLE = "E301"

    # Walk errors (E4xx)
    MISSING_START_STATE = "E401"
    DUPLICATE_START_STATE = "E402"
    STEP_LIMIT_TOO_LOW = "E403"
    NO_VALID_TRANSITIONS = "E404"

    # Export errors (E5xx)
    INCOMPLETE_GRAPH = "E501"
    MALFORMED_EDGE = "E502"

    # Driver errors (E6xx)
    INVALID_DRIVER = "E601"

    # Configuration errors (E7xx)
    INVALID_CONFIG = "E701"

    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if code_num < 200:
            return "input"
        elif code_num < 300:
            return "model"
        elif code_num < 400:
            return "dispatch"
        elif code_num < 500:
            return "walk"
        elif code_num < 600:
            return "export"
        elif code_num < 700:
            return "driver"
        elif code_num < 800:
            return "config"
        else:
            return "unknown"


@dataclass
class ErrorContext:
    """Structured context attached to every statewalk error.

    Attributes:
        state: State the model was in (or was asked to start from)
        action: Action name involved in the failure
        source: Input source (file path, table name) being processed
        extra: Additional context-specific information
        timestamp: When the error occurred
    """

    state: str | None = None
    action: str | None = None
    source: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "state": self.state,
            "action": self.action,
            "source": self.source,
            "extra": self.extra,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the error location as a readable string."""
        parts = []
        if self.source:
            parts.append(f"source={self.source}")
        if self.state:
            parts.append(f"state={self.state}")
        if self.action:
            parts.append(f"action={self.action}")
        return " > ".join(parts) if parts else "unknown location"


class StateWalkError(Exception):
    """Base exception for all statewalk errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with model details
        suggestions: List of actionable steps to resolve the issue
        recoverable: Always False; statewalk never retries
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []
    recoverable: bool = False

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        parts = [f"[{self.error_code.value}] {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            parts.append(f"at {location}")

        return " | ".join(parts)

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [
            f"Error [{self.error_code.value}]: {self.message}",
        ]

        location = self.context.format_location()
        if location != "unknown location":
            lines.append(f"Location: {location}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "recoverable": self.recoverable,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------


class InputError(StateWalkError):
    """Tabular input could not be turned into transitions."""

    error_code = ErrorCode.MISSING_SOURCE
    default_message = "Invalid state table input"


class MissingSourceError(InputError):
    """The state table file does not exist."""

    error_code = ErrorCode.MISSING_SOURCE
    default_message = "Missing state table file"
    default_suggestions = [
        "Check the path to the state table",
        "Relative paths are resolved from the current working directory",
    ]


class EmptyInputError(InputError):
    """The state table exists but holds nothing."""

    error_code = ErrorCode.EMPTY_INPUT
    default_message = "State table is empty"
    default_suggestions = [
        "Add a header row and at least one transition row",
    ]


class InsufficientDataError(InputError):
    """The state table has a header row but no transitions."""

    error_code = ErrorCode.INSUFFICIENT_DATA
    default_message = "Missing data in state table"
    default_suggestions = [
        "Add at least one transition row below the header",
    ]


class UnknownLayoutError(InputError):
    """The first cell of the table names neither supported layout."""

    error_code = ErrorCode.UNKNOWN_LAYOUT
    default_message = "Unable to detect whether this is a linear or matrix state table"
    default_suggestions = [
        "Start a linear table with the header cell 'Start State'",
        "Start a matrix table with the corner cell 'Start/End'",
    ]


# ---------------------------------------------------------------------------
# Model construction errors
# ---------------------------------------------------------------------------


class ModelError(StateWalkError):
    """The model definition is inconsistent."""

    error_code = ErrorCode.UNKNOWN_ACTION
    default_message = "Invalid model definition"


class UnknownActionError(ModelError):
    """A transition or guard references an action that was never defined."""

    error_code = ErrorCode.UNKNOWN_ACTION
    default_message = "Action not found"
    default_suggestions = [
        "Call define_action() before attaching transitions or guards to it",
    ]


# ---------------------------------------------------------------------------
# Dispatch errors
# ---------------------------------------------------------------------------


class DispatchError(StateWalkError):
    """An action could not be dispatched."""

    error_code = ErrorCode.ACTION_NOT_AVAILABLE
    default_message = "Action dispatch failed"


class ActionNotAvailableError(DispatchError):
    """The action is known but not offered from the current state."""

    error_code = ErrorCode.ACTION_NOT_AVAILABLE
    default_message = "Action is not available from the current state"
    default_suggestions = [
        "Check actions_for_state() for the actions offered by the current state",
        "Set machine.state before calling actions directly",
    ]


# ---------------------------------------------------------------------------
# Walk errors
# ---------------------------------------------------------------------------


class WalkError(StateWalkError):
    """A walk could not be generated or measured."""

    error_code = ErrorCode.MISSING_START_STATE
    default_message = "Walk generation failed"


class MissingStartStateError(WalkError):
    """The requested start state is not part of the model."""

    error_code = ErrorCode.MISSING_START_STATE
    default_message = "Missing start state"
    default_suggestions = [
        "Start the walk from one of the states in machine.states_store",
    ]


class DuplicateStartStateError(WalkError):
    """The states store lists the start state more than once."""

    error_code = ErrorCode.DUPLICATE_START_STATE
    default_message = "Duplicate start states in states store"


class StepLimitTooLowError(WalkError):
    """The step limit must be strictly greater than 2."""

    error_code = ErrorCode.STEP_LIMIT_TOO_LOW
    default_message = "Step limit is too low"
    default_suggestions = [
        "Use a step limit of 3 or more",
    ]


class NoValidTransitionsError(WalkError):
    """Transition coverage is undefined for a model with no transitions."""

    error_code = ErrorCode.NO_VALID_TRANSITIONS
    default_message = "Model has no valid transitions to measure coverage against"


# ---------------------------------------------------------------------------
# Export errors
# ---------------------------------------------------------------------------


class ExportError(StateWalkError):
    """The model could not be rendered as a graph."""

    error_code = ErrorCode.INCOMPLETE_GRAPH
    default_message = "Graph export failed"


class IncompleteGraphError(ExportError):
    """Graph name or type was not set before rendering."""

    error_code = ErrorCode.INCOMPLETE_GRAPH
    default_message = "Graph name or type not set"
    default_suggestions = [
        "Set graph.name and graph.graph_type before rendering",
    ]


class MalformedEdgeError(ExportError):
    """add_edge() received the wrong number of values."""

    error_code = ErrorCode.MALFORMED_EDGE
    default_message = "Incorrect number of arguments in add_edge"
    default_suggestions = [
        "Pass (from, to, label) or (from, to, label, guarded)",
    ]


# ---------------------------------------------------------------------------
# Driver errors
# ---------------------------------------------------------------------------


class DriverError(StateWalkError):
    """A walk could not be applied to a driver."""

    error_code = ErrorCode.INVALID_DRIVER
    default_message = "Driver error"


class InvalidDriverError(DriverError):
    """The object passed as driver does not expose the driver surface."""

    error_code = ErrorCode.INVALID_DRIVER
    default_message = "Not a SUT driver"
    default_suggestions = [
        "Pass an object with test_<STATE> methods and one method per action",
    ]


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigValidationError(StateWalkError):
    """Configuration validation failed."""

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid configuration"
    default_suggestions = [
        "Check statewalk.yaml syntax with a YAML linter",
        "Check STATEWALK_* environment variables",
    ]

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message=message, **kwargs)

    def __str__(self) -> str:
        base = super().__str__()
        if self.field:
            base = f"{base} (field: {self.field})"
        return base

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        result["value"] = repr(self.value)
        return result
