from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import jwt
from jose.exceptions import JWTError
from liftlog.settings import get_settings

def create_access_token(
    sub: str,
    *,
    expires_minutes: Optional[int] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> str:
    """Mint a token the way the identity provider does (local tooling and tests)."""
    s = get_settings()
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=expires_minutes or s.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload: Dict[str, Any] = {
        "sub": sub,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    if extra:
        payload.update(extra)
    return jwt.encode(payload, s.SECRET_KEY, algorithm=s.ALGORITHM)

def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiration. Raise if token is expired/invalid.
    """
    s = get_settings()
    payload = jwt.decode(
        token,
        s.SECRET_KEY,
        algorithms=[s.ALGORITHM],
        options={
            "verify_signature": True,
            "verify_exp": True,
        },
    )
    if "exp" not in payload:
        raise JWTError("Missing exp")
    return payload
