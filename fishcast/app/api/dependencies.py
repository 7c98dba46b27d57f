# fishcast/app/api/dependencies.py
# FastAPI dependencies: stores, randomness and the authenticated user.
import logging
import random
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from fishcast.app.core.security import InvalidTokenError, SecurityManager
from fishcast.app.db.session import get_db
from fishcast.app.models.user import User
from fishcast.app.stores import CatchStore, ConditionStore, HotspotStore, PredictionStore, UserStore

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is reported as 401 by us rather than 403 by FastAPI
bearer_scheme = HTTPBearer(auto_error=False)
security_manager = SecurityManager()


def get_security() -> SecurityManager:
    return security_manager


def get_rng() -> random.Random:
    """Random source for simulated data; tests override this with a seeded instance."""
    return random.Random()


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_condition_store(db: Session = Depends(get_db)) -> ConditionStore:
    return ConditionStore(db)


def get_prediction_store(db: Session = Depends(get_db)) -> PredictionStore:
    return PredictionStore(db)


def get_catch_store(db: Session = Depends(get_db)) -> CatchStore:
    return CatchStore(db)


def get_hotspot_store(db: Session = Depends(get_db)) -> HotspotStore:
    return HotspotStore(db)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    users: UserStore = Depends(get_user_store),
    security: SecurityManager = Depends(get_security),
) -> User:
    """
    Resolves the bearer token to a user.

    Missing token -> 401; invalid or expired token, or one for an unknown user -> 403.
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = security.decode_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.info("Rejected token: %s", e)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")

    user_id = payload["user_id"]
    user = users.get(user_id) if isinstance(user_id, int) else None
    if user is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")
    return user
