from fastapi import Depends, HTTPException, status, Request
from fastapi.security import OAuth2PasswordBearer, APIKeyHeader
from .jwt_handler import verify_access_token
from .api_key import verify_api_key, INTERNAL_API_HEADER

# Defines the expected header format (Bearer <token>)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)

# Defines the expected internal service header
api_key_header = APIKeyHeader(name=INTERNAL_API_HEADER, auto_error=False)

ADMIN_ROLE = "admin"


async def get_token_payload(request: Request, token: str = Depends(oauth2_scheme)) -> dict:
    """Dependency to validate the JWT and return its claims."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token:
        raise credentials_exception

    payload = verify_access_token(token)
    if payload is None or payload.get("sub") is None:
        raise credentials_exception

    # Store in request state for downstream use (like rate limiting)
    request.state.user_id = payload["sub"]
    return payload


async def get_current_user(payload: dict = Depends(get_token_payload)) -> str:
    """Dependency returning the authenticated profile id (sub)."""
    return payload["sub"]


async def require_admin(payload: dict = Depends(get_token_payload)) -> str:
    if payload.get("role") != ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator access required",
        )
    return payload["sub"]


async def require_buyer(payload: dict = Depends(get_token_payload)) -> str:
    # Admin accounts manage the shop; they cannot place orders
    if payload.get("role") == ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrators are not allowed to check out",
        )
    return payload["sub"]


async def verify_internal_api_key(api_key: str = Depends(api_key_header)) -> bool:
    """Dependency to validate service-to-service internal requests."""
    if not verify_api_key(api_key):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Invalid or missing {INTERNAL_API_HEADER} header"
        )
    return True
