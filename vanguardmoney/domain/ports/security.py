import uuid
from abc import ABC
from abc import abstractmethod

from vanguardmoney.domain.schemas.auth import TokenClaims


class PasswordHasherPort(ABC):
    """Interface for hashing and verifying passwords.

    This port abstracts the underlying password hashing mechanism, allowing the
    application to use different hashing algorithms without changing the core
    business logic. Implementations must be salted and adaptive, so hashing the
    same password twice never gives the same result.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hashes a plain text password.

        Args:
            password: The plain text password to hash.

        Returns:
            The hashed password string.
        """
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verifies a plain password against a previously hashed password.

        Args:
            plain_password: The plain text password provided by the user.
            hashed_password: The stored hashed password.

        Returns:
            True if the plain password matches the hashed password, False otherwise,
            including when the stored hash is malformed.
        """
        pass


class AccessTokenManagerPort(ABC):
    """Interface for issuing and verifying signed, time-limited access tokens.

    Verification only covers the token itself (signature, expiry, issuer). Whether
    the user it refers to still exists and is active is up to the caller.
    """

    @property
    @abstractmethod
    def expires_in(self) -> str:
        """The configured lifetime of the issued tokens (e.g. "24h")."""
        pass

    @abstractmethod
    def issue(self, user_id: uuid.UUID) -> str:
        """Issues a signed access token bound to a user.

        Args:
            user_id: The ID of the user the token asserts.

        Returns:
            The encoded and signed access token string.
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """Decodes and validates an access token.

        Args:
            token: The access token string to verify.

        Returns:
            The decoded claims.

        Raises:
            TokenExpired: If the token expiry is in the past.
            InvalidToken: If the token is malformed, its signature or issuer does not match,
                or a required claim is missing.
        """
        pass
