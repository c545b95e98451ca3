"""Parameter names for Java methods and constructors, read from Javadoc.

A fallback source of parameter names for reflection-based tools: the
Javadoc page of the declaring type is located in an archive, a directory or
on a web server, and the names are read from the documented signature of
the requested overload.
"""

from .data_models import CallableDescriptor, CallableKind, OnMissing, ParanamerConfig
from .errors import (
    ContentNotFoundError,
    ExtractionFailedError,
    ParameterNamesNotFoundError,
    ParanamerError,
    RootInvalidError,
    SignatureNotFoundError,
    UnsupportedCallableKindError,
    UnsupportedTypeNameError,
)
from .paranamer import JavadocParanamer, create_provider
from .path_resolver import resolve

__version__ = "1.0.0"

__all__ = [
    'CallableDescriptor',
    'CallableKind',
    'OnMissing',
    'ParanamerConfig',
    'ContentNotFoundError',
    'ExtractionFailedError',
    'ParameterNamesNotFoundError',
    'ParanamerError',
    'RootInvalidError',
    'SignatureNotFoundError',
    'UnsupportedCallableKindError',
    'UnsupportedTypeNameError',
    'JavadocParanamer',
    'create_provider',
    'resolve',
]
