"""JWT utilities: session token signing and verification"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from sihs_cms.config import AuthConfig
from sihs_cms.errors import InvalidToken, TokenExpired
from sihs_cms.utils.logger import logger


class TokenSigner:
    """Issues and verifies HS256 bearer tokens for admin sessions.

    Tokens carry ``sub`` (the account's ``admin_id``), ``iat``, ``exp`` and a
    random ``jti``. Nothing is persisted server-side.
    """

    def __init__(self, config: AuthConfig):
        self.config = config

    def issue(self, subject: str, now: Optional[datetime] = None) -> str:
        """Sign and return a token for ``subject``.

        Args:
            subject: Value for the 'sub' claim (the account's admin_id).
            now:     Issue instant; defaults to the current UTC time.
        """
        issued = now or datetime.now(timezone.utc)
        iat = int(issued.timestamp())

        payload: Dict[str, Any] = {
            "sub": subject,
            "jti": str(uuid.uuid4()),
            "iat": iat,
            "exp": iat + self.config.token_expire_seconds,
            "type": "admin",
        }
        return jwt.encode(payload, self.config.jwt_secret, algorithm=self.config.jwt_algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry and return the payload.

        Raises:
            TokenExpired: signature valid but ``exp`` has passed.
            InvalidToken: bad signature, malformed token, or missing ``sub``.
        """
        try:
            payload = jwt.decode(
                token,
                self.config.jwt_secret,
                algorithms=[self.config.jwt_algorithm],
            )
        except ExpiredSignatureError:
            raise TokenExpired()
        except JWTError as exc:
            logger.debug(f"JWT decode failed: {exc}")
            raise InvalidToken()

        if not payload.get("sub"):
            raise InvalidToken()
        return payload
