"""Authenticated caller, as asserted by the identity provider's token."""

from app.schemas.common import CamelModel


class CurrentUser(CamelModel):
    id: str
    email: str | None = None
