"""Parser for the ``WWW-Authenticate`` device-authorization challenge.

Grammar::

    challenge = [scheme 1*WSP] param *("," param)
    param     = key "=" value
    value     = token | '"' text '"'

Values are split on the first ``=`` only, and a single layer of double
quotes is removed. Segments without ``=`` are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AuthenticateChallenge:
    scheme: str | None
    params: dict[str, str] = field(default_factory=dict)


def parse_challenge(value: str) -> AuthenticateChallenge:
    value = (value or "").strip()
    scheme = None
    parts = value.split(None, 1)
    if len(parts) == 2 and "=" not in parts[0] and "," not in parts[0]:
        scheme, value = parts
    elif len(parts) == 1 and "=" not in value:
        return AuthenticateChallenge(scheme=value)

    params: dict[str, str] = {}
    for segment in value.split(","):
        key, sep, raw = segment.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        params[key] = _unquote(raw.strip())
    return AuthenticateChallenge(scheme=scheme, params=params)


def parse_authenticate_header(value: str) -> dict[str, str]:
    return parse_challenge(value).params


def _unquote(value: str) -> str:
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value
