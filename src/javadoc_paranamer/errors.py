"""Error taxonomy for Javadoc parameter-name lookups.

Every error carries a message, optional suggestions for the person running
the lookup and a stable error code. Construction failures
(:class:`RootInvalidError`) and programmer errors
(:class:`UnsupportedCallableKindError`) are always raised. The remaining
errors mean "names not found" and are subject to the caller's
:class:`~javadoc_paranamer.data_models.OnMissing` policy.
"""

from typing import List, Optional


class ParanamerError(Exception):
    """Base class for all javadoc_paranamer errors."""

    error_code = "PARANAMER_ERROR"

    def __init__(self, message: str, suggestions: Optional[List[str]] = None,
                 error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []
        if error_code is not None:
            self.error_code = error_code


class RootInvalidError(ParanamerError):
    """The documentation root does not exist or is not a Javadoc root."""

    error_code = "ROOT_INVALID"


class ContentNotFoundError(ParanamerError):
    """No readable documentation page exists at the resolved path."""

    error_code = "CONTENT_NOT_FOUND"


class UnsupportedTypeNameError(ParanamerError):
    """The type name cannot be mapped to a documentation path (nested or malformed)."""

    error_code = "UNSUPPORTED_TYPE"


class SignatureNotFoundError(ParanamerError):
    """The page has no declaration matching the callable's name and parameter types."""

    error_code = "SIGNATURE_NOT_FOUND"


class ExtractionFailedError(ParanamerError):
    """A declaration was matched but its parameter names could not be read."""

    error_code = "EXTRACTION_FAILED"


class UnsupportedCallableKindError(ParanamerError, TypeError):
    """The lookup target is neither a method nor a constructor."""

    error_code = "UNSUPPORTED_KIND"


class ParameterNamesNotFoundError(ParanamerError):
    """Raised by a strict lookup when names could not be found.

    Attributes:
        callable_description: Human-readable description of the callable
        cause: The underlying locator or extractor error
    """

    error_code = "NAMES_NOT_FOUND"

    def __init__(self, callable_description: str, cause: ParanamerError):
        super().__init__(
            f"Parameter names not found for {callable_description}: {cause.message}",
            suggestions=list(cause.suggestions),
        )
        self.callable_description = callable_description
        self.cause = cause


# Errors that mean "no names available" rather than a broken setup
NAMES_NOT_FOUND_ERRORS = (
    ContentNotFoundError,
    UnsupportedTypeNameError,
    SignatureNotFoundError,
    ExtractionFailedError,
)
