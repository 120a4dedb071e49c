"""JWT Session Token Service

Implements session tokens as HMAC-signed JWTs using python-jose.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import ExpiredSignatureError, JWTError, jwt

from src.app.services.token_service import (
    TokenService,
    TokenClaims,
    TokenExpiredError,
    InvalidTokenError,
)


class JoseTokenService(TokenService):
    """
    JWT implementation of TokenService

    Payload keys: userId, username, email, iat, exp.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: Optional[timedelta] = None,
    ):
        """
        Args:
            secret: Server-held signing secret
            algorithm: HMAC algorithm (default HS256)
            expires_in: Token lifetime (default 24 hours)
        """
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in if expires_in is not None else timedelta(hours=24)

    def issue(self, claims: TokenClaims) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "userId": claims.user_id,
            "username": claims.username,
            "email": claims.email,
            "iat": int(now.timestamp()),
            "exp": int((now + self.expires_in).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpiredError("Token expired") from exc
        except JWTError as exc:
            raise InvalidTokenError("Invalid token") from exc

        try:
            return TokenClaims(
                user_id=payload["userId"],
                username=payload["username"],
                email=payload["email"],
            )
        except (KeyError, ValueError) as exc:
            raise InvalidTokenError("Token missing identity claims") from exc
