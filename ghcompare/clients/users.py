"""Users resource client (token validation)."""

from typing import TYPE_CHECKING

from ghcompare.exceptions import AccessDeniedError, AuthFailedError
from ghcompare.logging import get_logger
from ghcompare.types.payloads import UserPayload, parse_user

if TYPE_CHECKING:
    from ghcompare.transport import HTTPTransport

logger = get_logger()


class UsersClient:
    """Client for the authenticated-user endpoint."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get_authenticated(self) -> UserPayload:
        """
        Fetch the user the configured token belongs to.

        Raises:
            AuthFailedError: If no token is configured or it is rejected
        """
        return parse_user(self.transport.get("/user"))

    def validate_token(self) -> bool:
        """
        Check whether the configured token is accepted by GitHub.

        Returns False without any request when no token is configured, and
        False when GitHub rejects the token. Transport failures and other
        API errors propagate so they are not mistaken for a bad token.
        """
        if not self.transport.config.has_token:
            return False
        try:
            user = self.get_authenticated()
        except (AuthFailedError, AccessDeniedError) as e:
            logger.info("Token rejected: %s", e.message)
            return False
        logger.debug("Token valid for %s", user.login)
        return True
