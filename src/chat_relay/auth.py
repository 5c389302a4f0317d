"""Demo credential check gating the user-facing endpoints.

The demo token is one shared secret, not a per-user identity: holding it is
a capability flag. When any provider key is configured the deployment is
trusted and no token is needed.
"""

from __future__ import annotations

import hmac

from chat_relay.availability import AvailabilityRegistry
from chat_relay.config import Settings
from chat_relay.errors import AuthError


class AccessGate:
    def __init__(self, settings: Settings, registry: AvailabilityRegistry) -> None:
        self._user = settings.demo_user
        self._password = settings.demo_password
        self._token = settings.demo_token
        self._registry = registry

    def authenticate(self, username: str | None, password: str | None) -> str:
        """Exchange demo credentials for the shared token."""
        if _matches(username, self._user) and _matches(password, self._password):
            return self._token
        raise AuthError("Credenciales invalidas.")

    def is_authorized(self, token: str | None) -> bool:
        return self._registry.any() or _matches(token, self._token)

    def require(self, token: str | None) -> None:
        if not self.is_authorized(token):
            raise AuthError("Autenticacion requerida.")


def _matches(value: str | None, expected: str) -> bool:
    if not isinstance(value, str):
        return False
    return hmac.compare_digest(value.encode("utf-8"), expected.encode("utf-8"))
