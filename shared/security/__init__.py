from .jwt_handler import create_access_token, create_profile_token, verify_access_token
from .api_key import verify_api_key, internal_headers
from .dependencies import (
    get_current_user,
    get_token_payload,
    require_admin,
    require_buyer,
    verify_internal_api_key,
)
from .rate_limiter import limiter, user_id_or_ip

__all__ = [
    "create_access_token",
    "create_profile_token",
    "verify_access_token",
    "verify_api_key",
    "internal_headers",
    "get_current_user",
    "get_token_payload",
    "require_admin",
    "require_buyer",
    "verify_internal_api_key",
    "limiter",
    "user_id_or_ip"
]
