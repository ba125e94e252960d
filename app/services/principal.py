"""Resolution of bearer credentials into authenticated principals."""

from dataclasses import dataclass
from typing import Protocol

from app.models.user import ROLES
from app.services.jwt import JWTService, get_jwt_service


@dataclass(frozen=True)
class Principal:
    """Authenticated caller."""

    id: int
    role: str
    registration_number: str = ""
    display_name: str = ""


class PrincipalResolver(Protocol):
    def resolve(self, token: str) -> Principal | None:
        """Return the principal for a credential, or None if it is not valid."""


class JWTPrincipalResolver:
    """Resolves principals from signed JWT bearer tokens."""

    def __init__(self, jwt_service: JWTService) -> None:
        self.jwt_service = jwt_service

    def resolve(self, token: str) -> Principal | None:
        payload = self.jwt_service.decode_token(token)
        if not payload:
            return None
        role = payload.get("role")
        if role not in ROLES:
            return None
        try:
            user_id = int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            return None
        return Principal(
            id=user_id,
            role=role,
            registration_number=payload.get("regno", ""),
            display_name=payload.get("displayName", ""),
        )


_resolver: JWTPrincipalResolver | None = None


def get_principal_resolver() -> PrincipalResolver:
    """Get singleton principal resolver instance."""
    global _resolver
    if _resolver is None:
        _resolver = JWTPrincipalResolver(get_jwt_service())
    return _resolver
