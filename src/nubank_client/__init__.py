# Re-export from local modules
from .auth import (
    AuthenticationSession,
    CertificateAuthenticator,
    ChallengeRequester,
    CodeExchanger,
    PasswordGrantAuthenticator,
    parse_authenticate_header,
)
from .client import AuthorizedClient, EndpointDirectory, JsonHttpClient
from .config import Settings
from .crypto import KeyPairGenerator, new_device_id
from .errors import (
    InvalidStateError,
    KeyGenerationError,
    NoPendingChallengeError,
    NotAuthenticatedError,
    NubankClientError,
    RequestCancelledError,
    UnexpectedResponseError,
    UnknownEndpointError,
)
from .types import (
    Authenticator,
    BearerToken,
    ClientCertificate,
    Credential,
    KeyPair,
    SessionState,
)

__all__ = [
    "AuthenticationSession",
    "Authenticator",
    "AuthorizedClient",
    "BearerToken",
    "CertificateAuthenticator",
    "ChallengeRequester",
    "ClientCertificate",
    "CodeExchanger",
    "Credential",
    "EndpointDirectory",
    "InvalidStateError",
    "JsonHttpClient",
    "KeyGenerationError",
    "KeyPair",
    "KeyPairGenerator",
    "NoPendingChallengeError",
    "NotAuthenticatedError",
    "NubankClientError",
    "PasswordGrantAuthenticator",
    "RequestCancelledError",
    "SessionState",
    "Settings",
    "UnexpectedResponseError",
    "UnknownEndpointError",
    "new_device_id",
    "parse_authenticate_header",
]
