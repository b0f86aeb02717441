"""Configuration settings for the Nubank client."""

from __future__ import annotations

import os
from dataclasses import dataclass

DISCOVERY_URL = "https://prod-s0-webapp-proxy.nubank.com.br/api/app/discovery"


@dataclass
class Settings:
    """Settings shared by every request the client makes.

    The password-grant client id/secret are credentials owned by the caller,
    so they default to empty and must be supplied explicitly or via env.
    """

    discovery_url: str = DISCOVERY_URL
    correlation_id: str = "WEB-APP.pewW9"
    user_agent: str = "nubank-client Python Client"
    client_model: str = "nubank-client"
    client_id: str = ""
    client_secret: str = ""
    timeout: float = 30.0
    key_size: int = 2048

    @classmethod
    def from_env(cls) -> Settings:
        defaults = cls()
        return cls(
            discovery_url=os.getenv("NUBANK_DISCOVERY_URL", defaults.discovery_url),
            correlation_id=os.getenv("NUBANK_CORRELATION_ID", defaults.correlation_id),
            user_agent=os.getenv("NUBANK_USER_AGENT", defaults.user_agent),
            client_model=os.getenv("NUBANK_CLIENT_MODEL", defaults.client_model),
            client_id=os.getenv("NUBANK_CLIENT_ID", ""),
            client_secret=os.getenv("NUBANK_CLIENT_SECRET", ""),
            timeout=float(os.getenv("NUBANK_HTTP_TIMEOUT", str(defaults.timeout))),
            key_size=int(os.getenv("NUBANK_RSA_KEY_SIZE", str(defaults.key_size))),
        )
