"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.rate_limit import limiter
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserInfo
from app.services.auth import AuthResult, get_auth_service
from app.services.jwt import get_jwt_service

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def _token_response(result: AuthResult) -> TokenResponse:
    jwt_service = get_jwt_service()
    token = jwt_service.create_token(
        user_id=result.user_id,  # type: ignore[arg-type]
        role=result.role,  # type: ignore[arg-type]
        registration_number=result.registration_number,  # type: ignore[arg-type]
        display_name=result.display_name,  # type: ignore[arg-type]
    )
    return TokenResponse(
        token=token,
        user=UserInfo(
            id=result.user_id,  # type: ignore[arg-type]
            role=result.role,  # type: ignore[arg-type]
            registration_number=result.registration_number,  # type: ignore[arg-type]
            display_name=result.display_name,  # type: ignore[arg-type]
        ),
    )


@router.post("/register", response_model=TokenResponse)
@limiter.limit("5/minute")
def register(request: Request, body: RegisterRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """Register a new student, teacher or parent account."""
    auth_service = get_auth_service()
    result = auth_service.register(db, body.registration_number, body.password, body.role, body.display_name)

    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)

    return _token_response(result)


@router.post("/login", response_model=TokenResponse)
@limiter.limit("10/minute")
def login(request: Request, body: LoginRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """Authenticate and receive a JWT token."""
    auth_service = get_auth_service()
    result = auth_service.authenticate(db, body.registration_number, body.password, body.role)

    if not result.success:
        raise HTTPException(status_code=401, detail=result.error)

    return _token_response(result)


@router.get("/verify")
def verify_token(token: str) -> dict:
    """Verify a JWT token and return its payload."""
    jwt_service = get_jwt_service()
    payload = jwt_service.decode_token(token)

    if not payload:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    return {
        "valid": True,
        "user_id": payload["sub"],
        "role": payload.get("role"),
        "registration_number": payload.get("regno"),
        "display_name": payload.get("displayName"),
    }
