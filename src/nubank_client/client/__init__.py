from .discovery import EndpointDirectory
from .http import JsonHttpClient
from .mtls import AuthorizedClient

__all__ = ["AuthorizedClient", "EndpointDirectory", "JsonHttpClient"]
