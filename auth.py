# auth.py
"""
Bearer token verification.

Tokens are issued by the external auth provider; this service only checks
the signature and reads the subject claim.
"""
import os

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt
from dotenv import load_dotenv

load_dotenv()


def _secret_key() -> str:
     secret = os.getenv("JWT_SECRET")
     if not secret:
          raise HTTPException(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               detail="Token verification is not configured"
          )
     return secret


def _algorithm() -> str:
     return os.getenv("JWT_ALGORITHM", "HS256")


def verify_token(request: Request) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=401, detail="Missing token")
     token = auth.split(" ", 1)[1]
     try:
          payload = jwt.decode(token, _secret_key(), algorithms=[_algorithm()])
          return payload
     except JWTError:
          raise HTTPException(status_code=403, detail="Invalid token")


def get_current_user_id(token: dict = Depends(verify_token)) -> str:
     """Owning-user identifier for the request: the ``sub`` claim, else ``id``."""
     user_id = token.get("sub") or token.get("id")
     if not user_id:
          raise HTTPException(status_code=401, detail="Token has no subject")
     return str(user_id)
