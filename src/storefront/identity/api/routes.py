"""FastAPI endpoints for registration, login and the current user."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.identity.api.schemas import AuthResponse, LoginRequest, MeResponse, RegisterRequest, UserResponse
from storefront.identity.auth import AuthSession, authenticate, require_session, start_session
from storefront.identity.registration import register_user
from storefront.identity.user.user import User

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=201, response_model=AuthResponse)
async def register(body: RegisterRequest) -> AuthResponse:
    user = register_user(
        email=body.email,
        password=body.password,
        first_name=body.first_name,
        last_name=body.last_name,
    )
    session = start_session(user)
    return AuthResponse(user=UserResponse.from_user(user), token=session.token)


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest) -> AuthResponse:
    session = authenticate(body.email, body.password)
    user = current_domain.repository_for(User).get(session.user_id)
    return AuthResponse(user=UserResponse.from_user(user), token=session.token)


@router.get("/me", response_model=MeResponse)
async def me(session: AuthSession = Depends(require_session)) -> MeResponse:
    user = current_domain.repository_for(User).get(session.user_id)
    return MeResponse(user=UserResponse.from_user(user))
