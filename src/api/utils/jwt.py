from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from libs.result import Error, Result, Return

REQUIRED_CLAIMS = ("id", "email", "username")


class TokenIssuer:
    """
    Issues and verifies bearer tokens.

    Stateless: the only secret is the signing key handed in at construction.
    """

    def __init__(self, secret: str, expires_delta: timedelta, algorithm: str = "HS256"):
        self.secret = secret
        self.expires_delta = expires_delta
        self.algorithm = algorithm

    @classmethod
    def from_config(cls, config) -> "TokenIssuer":
        return cls(
            secret=config.JWT_SECRET,
            expires_delta=timedelta(days=config.JWT_EXPIRES_DAYS),
        )

    def issue(self, user) -> str:
        """
        Generate JWT access token

        Args:
            user: User entity (id, email, username are embedded)

        Returns:
            JWT token string (HS256, expires after expires_delta)
        """
        now = datetime.now(UTC)
        payload = {
            "id": str(user.id),
            "email": user.email,
            "username": user.username,
            "exp": now + self.expires_delta,
            "iat": now,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Result[dict]:
        """
        Verify and decode JWT token

        Args:
            token: JWT token string

        Returns:
            Result with decoded claims, or Error TOKEN_EXPIRED / INVALID_TOKEN
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            return Return.err(
                Error("TOKEN_EXPIRED", "Token has expired. Please log in again.")
            )
        except JWTError:
            return Return.err(Error("INVALID_TOKEN", "Invalid token. Please log in again."))

        if any(not payload.get(claim) for claim in REQUIRED_CLAIMS):
            return Return.err(Error("INVALID_TOKEN", "Invalid token. Please log in again."))

        return Return.ok(payload)
