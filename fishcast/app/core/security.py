# fishcast/app/core/security.py
# Password hashing and access tokens.
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt
from jwt import InvalidTokenError

from fishcast.app.core.config import BCRYPT_ROUNDS, JWT_ALGORITHM, JWT_EXPIRE_DAYS, JWT_SECRET

__all__ = ["SecurityManager", "InvalidTokenError"]


class SecurityManager:
    """bcrypt password hashes and HS256 JWT access tokens"""

    def __init__(
        self,
        secret: str = JWT_SECRET,
        algorithm: str = JWT_ALGORITHM,
        expire_days: int = JWT_EXPIRE_DAYS,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_days = expire_days
        self.bcrypt_rounds = bcrypt_rounds

    # ===== Password Hashing =====

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False

    # ===== JWT Token Management =====

    def create_access_token(self, user_id: int, email: str, name: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "user_id": user_id,
            "email": email,
            "name": name,
            "iat": now,
            "exp": now + timedelta(days=self.expire_days),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Returns the token claims.
        Raises InvalidTokenError (ExpiredSignatureError included) when the token is bad.
        """
        payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        if "user_id" not in payload:
            raise InvalidTokenError("Token has no user_id claim")
        return payload
