from django.contrib.auth.hashers import make_password, check_password
from django.utils import timezone

from base import Constants

# bcrypt only digests the first 72 bytes, JWTs are far longer
TOKEN_HASHER = "pbkdf2_sha256"

def store_hashed_refresh(user, raw_refresh_token):
    """
    Hash & save the raw refresh token on the user.
    """
    user.refreshToken = make_password(raw_refresh_token, hasher=TOKEN_HASHER)
    user.save(update_fields=[Constants.Field.REFRESH_TOKEN])

def verify_hashed_refresh(user, raw_refresh_token):
    """
    Check a raw token against the stored hash.
    """
    if not user.refreshToken:
        return False
    return check_password(raw_refresh_token, user.refreshToken)

def clear_hashed_refresh(user):
    user.refreshToken = None
    user.save(update_fields=[Constants.Field.REFRESH_TOKEN])

def today():
    """
    Current date in the project's time zone.
    """
    return timezone.localdate()

def set_token_cookie(response, name, token, lifetime):
    """
    Write a JWT as an HttpOnly cookie that expires with the token.
    """
    response.set_cookie(
        name,
        str(token),
        httponly=True,
        secure=True,
        samesite=Constants.CookiePolicy.SAME_SITE,
        max_age=int(lifetime.total_seconds()),
    )
