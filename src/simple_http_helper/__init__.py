"""Public surface for the simple HTTP helper."""

from .auth import Credential
from .content import (
    DeleteContent,
    GetContent,
    HttpContent,
    LoginsightGetContent,
    PatchContent,
    PostContent,
    RichBodyContent,
    RichUrlContent,
)
from .errors import (
    InvalidURIError,
    MalformedResponseError,
    SimpleHttpError,
    TransportError,
    UnsupportedEncodingError,
)
from .helper import SimpleHttpHelper, SimpleHttpsHelper, SimpleRequestHelper, create_helper
from .result import SimpleHttpResult
from .transport import HttpxTransport, Transport, TransportResponse
from .types import Endpoint
from .version import __version__

__all__ = [
    "__version__",
    "Credential",
    "DeleteContent",
    "Endpoint",
    "GetContent",
    "HttpContent",
    "HttpxTransport",
    "InvalidURIError",
    "LoginsightGetContent",
    "MalformedResponseError",
    "PatchContent",
    "PostContent",
    "RichBodyContent",
    "RichUrlContent",
    "SimpleHttpError",
    "SimpleHttpHelper",
    "SimpleHttpResult",
    "SimpleHttpsHelper",
    "SimpleRequestHelper",
    "Transport",
    "TransportError",
    "TransportResponse",
    "UnsupportedEncodingError",
    "create_helper",
]
