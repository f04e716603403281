import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

# Add parent directory to path so we can import discoverzim
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

import jwt
from discoverzim.config.settings import Config


def generate_access_token(
    user_id: str = "user-1",
    email: str = "traveller@example.com",
    session_id: Optional[str] = None,
    expires_in: timedelta = timedelta(hours=1),
    secret: Optional[str] = None,
    audience: Optional[str] = None,
) -> str:
    """Generate an access token shaped like the hosted auth service's."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "session_id": session_id or f"session-{user_id}",
        "role": "authenticated",
        "iat": now,
        "exp": now + expires_in,
        "aud": audience or Config.SUPABASE_JWT_AUDIENCE,
    }
    return jwt.encode(payload, secret or Config.SUPABASE_JWT_SECRET, algorithm="HS256")


if __name__ == "__main__":
    token = generate_access_token(*sys.argv[1:2])
    print(f"Bearer {token}")
