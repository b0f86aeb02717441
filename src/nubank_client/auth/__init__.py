from .challenge import ChallengeRequester
from .exchange import CodeExchanger
from .header import AuthenticateChallenge, parse_authenticate_header, parse_challenge
from .password import PasswordGrantAuthenticator
from .session import AuthenticationSession, CertificateAuthenticator

__all__ = [
    "AuthenticateChallenge",
    "AuthenticationSession",
    "CertificateAuthenticator",
    "ChallengeRequester",
    "CodeExchanger",
    "PasswordGrantAuthenticator",
    "parse_authenticate_header",
    "parse_challenge",
]
