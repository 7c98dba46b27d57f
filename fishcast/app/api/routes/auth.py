# fishcast/app/api/routes/auth.py
# Registration and login.
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError

from fishcast.app.api.dependencies import get_security, get_user_store
from fishcast.app.api.schemas import AuthResponse, LoginRequest, RegisterRequest, UserOut
from fishcast.app.core.security import SecurityManager
from fishcast.app.stores.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _auth_response(message: str, user, security: SecurityManager) -> AuthResponse:
    token = security.create_access_token(user.id, user.email, user.name)
    return AuthResponse(message=message, token=token, user=UserOut.model_validate(user))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    users: UserStore = Depends(get_user_store),
    security: SecurityManager = Depends(get_security),
):
    if users.get_by_email(request.email) is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    try:
        user = users.create(request.email, security.hash_password(request.password), request.name)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")

    logger.info("Registered user %s", user.id)
    return _auth_response("User registered successfully", user, security)


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    users: UserStore = Depends(get_user_store),
    security: SecurityManager = Depends(get_security),
):
    user = users.get_by_email(request.email)
    if user is None or not security.verify_password(request.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")
    return _auth_response("Login successful", user, security)
