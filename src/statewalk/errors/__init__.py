"""statewalk error handling.

Custom exception hierarchy with error codes and structured context.
"""

from statewalk.errors.base import (
    ActionNotAvailableError,
    ConfigValidationError,
    DispatchError,
    DriverError,
    DuplicateStartStateError,
    EmptyInputError,
    ErrorCode,
    ErrorContext,
    ExportError,
    IncompleteGraphError,
    InputError,
    InsufficientDataError,
    InvalidDriverError,
    MalformedEdgeError,
    MissingSourceError,
    MissingStartStateError,
    ModelError,
    NoValidTransitionsError,
    StateWalkError,
    StepLimitTooLowError,
    UnknownActionError,
    UnknownLayoutError,
    WalkError,
)

__all__ = [
    # Base
    "StateWalkError",
    "ErrorCode",
    "ErrorContext",
    # Input errors
    "InputError",
    "MissingSourceError",
    "EmptyInputError",
    "InsufficientDataError",
    "UnknownLayoutError",
    # Model errors
    "ModelError",
    "UnknownActionError",
    # Dispatch errors
    "DispatchError",
    "ActionNotAvailableError",
    # Walk errors
    "WalkError",
    "MissingStartStateError",
    "DuplicateStartStateError",
    "StepLimitTooLowError",
    "NoValidTransitionsError",
    # Export errors
    "ExportError",
    "IncompleteGraphError",
    "MalformedEdgeError",
    # Driver errors
    "DriverError",
    "InvalidDriverError",
    # Config errors
    "ConfigValidationError",
]
