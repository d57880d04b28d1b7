"""Async users resource client (token validation)."""

from typing import TYPE_CHECKING

from ghcompare.exceptions import AccessDeniedError, AuthFailedError
from ghcompare.logging import get_logger
from ghcompare.types.payloads import UserPayload, parse_user

if TYPE_CHECKING:
    from ghcompare.async_transport import AsyncHTTPTransport

logger = get_logger()


class AsyncUsersClient:
    """Async client for the authenticated-user endpoint."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def get_authenticated(self) -> UserPayload:
        return parse_user(await self.transport.get("/user"))

    async def validate_token(self) -> bool:
        """
        Check whether the configured token is accepted by GitHub.

        No request is made when no token is configured.
        """
        if not self.transport.config.has_token:
            return False
        try:
            await self.get_authenticated()
        except (AuthFailedError, AccessDeniedError) as e:
            logger.info("Token rejected: %s", e.message)
            return False
        return True
