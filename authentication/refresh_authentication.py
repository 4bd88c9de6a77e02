from django.conf import settings
from django.contrib.auth import get_user_model

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

from base.utils import verify_hashed_refresh
from base import Constants

User = get_user_model()

class RefreshAuthentication(JWTAuthentication):
    """
    JWTAuthentication reading the tokens from the session cookies.

    A valid accessToken cookie authenticates directly. When it has expired,
    the refreshToken cookie is checked against the hash stored on the user
    and a fresh access token is minted for RefreshCookieMiddleware to send
    back. Requests without cookies fall back to the `Authorization: Bearer`
    header.
    """
    def authenticate(self, request):
        rawAccess = request.COOKIES.get(Constants.CookieName.ACCESS_TOKEN)
        rawRefresh = request.COOKIES.get(Constants.CookieName.REFRESH_TOKEN)

        if not rawAccess and not rawRefresh:
            return super().authenticate(request)

        if rawAccess:
            try:
                validated = self.get_validated_token(rawAccess)

                return self.get_user(validated), validated
            except InvalidToken:
                # expired or tampered, fall through to the refresh cookie
                pass

        if not rawRefresh:
            return None

        user_id = self._user_id_from(rawRefresh)
        if not user_id:
            return None

        user = User.objects.filter(id=user_id, is_active=True).first()
        if not user:
            return None

        if not verify_hashed_refresh(user, rawRefresh):
            return None

        newAccess = str(AccessToken.for_user(user))
        # picked up by RefreshCookieMiddleware on the way out
        request._request._access = newAccess

        validated = self.get_validated_token(newAccess)
        return self.get_user(validated), validated

    def _user_id_from(self, rawRefresh):
        """
        Read the user id from the refresh token once its signature, expiry
        and blacklist entry have been checked. None if any check fails.
        """
        try:
            return RefreshToken(rawRefresh).get(settings.SIMPLE_JWT["USER_ID_CLAIM"])
        except TokenError:
            return None
