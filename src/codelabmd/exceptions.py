#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the codelabmd library.

This module defines specialized exception classes for the error conditions
that can occur while loading and rendering tutorial node trees.

Exception Hierarchy
-------------------
- CodelabMdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)
    - DialectError (unknown output dialect)

  - ParsingError (serialized node tree could not be loaded)

  - RenderingError (output generation failures)
    - OutputWriteError (the output sink rejected a write)
    - MalformedTreeError (cyclic or excessively deep node tree)

"""

from typing import Any


class CodelabMdError(Exception):
    """Base exception class for all codelabmd-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(CodelabMdError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a renderer receives the wrong options class.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class DialectError(ValidationError):
    """Exception raised when an unknown output dialect is requested.

    Parameters
    ----------
    dialect : str
        The dialect identifier that was requested
    available : list of str
        Identifiers of the registered dialects

    """

    def __init__(self, dialect: str, available: list[str]):
        """Initialize the dialect error."""
        message = f"Unknown dialect '{dialect}'. Available dialects: {', '.join(sorted(available))}"
        super().__init__(message, parameter_name="dialect", parameter_value=dialect)
        self.dialect = dialect
        self.available = available


class ParsingError(CodelabMdError):
    """Exception raised when a serialized node tree cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    source : str, optional
        Name of the input that failed to load
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, source: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.source = source


class RenderingError(CodelabMdError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when the output sink fails to accept a write.

    Once raised for a sink, every later write on that sink raises again
    without touching the underlying stream.

    Parameters
    ----------
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The I/O error reported by the underlying stream

    """

    def __init__(self, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write rendered output: {original_error}"
        super().__init__(message, rendering_stage="write", original_error=original_error)


class MalformedTreeError(RenderingError):
    """Exception raised for node trees that cannot be rendered safely.

    Raised when a node appears twice on its own ancestor path (a cycle) or
    when container nesting exceeds the configured maximum depth.

    Parameters
    ----------
    message : str
        Description of the problem
    depth : int, optional
        Nesting depth at which the problem was detected
    original_error : Exception, optional
        The interpreter error, when the tree exhausted the call stack

    """

    def __init__(self, message: str, depth: int | None = None, original_error: Exception | None = None):
        """Initialize the malformed tree error."""
        super().__init__(message, rendering_stage="traversal", original_error=original_error)
        self.depth = depth
