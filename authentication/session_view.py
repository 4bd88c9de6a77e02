import logging

from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.exceptions import TokenError

from api.serializers import LoginSerializer, UserModelSerializer
from api.services import UserService

from base import Constants
from base import utils

logger = logging.getLogger(__name__)

class SessionViewSet(viewsets.ViewSet):
    """
    Cookie sessions: log in, read the logged in user, log out.
    """
    user_service = UserService()

    def get_permissions(self):
        if self.action == "login":
            return [AllowAny()]

        return [IsAuthenticated()]

    def login(self, request):
        """
        POST /api/sessions
        Body:
        {
          "username": string,
          "password": string
        }
        Answers with the user and sets the accessToken/refreshToken cookies.
        """
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        user = self.user_service.authenticate(**serializer.validated_data)
        if not user:
            return Response(
                {"error": "Incorrect username and/or password", "status": status.HTTP_401_UNAUTHORIZED},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        refreshToken = RefreshToken.for_user(user)
        utils.store_hashed_refresh(user, str(refreshToken))
        logger.info(f"{user.username} logged in")

        return setCookie(refreshToken.access_token, refreshToken, user)

    def current(self, request):
        """
        GET /api/sessions/current
        """
        return Response(UserModelSerializer(request.user).data)

    def logout(self, request):
        """
        DELETE /api/sessions/current
        Blacklists the refresh cookie, forgets its stored hash and expires
        both cookies.
        """
        rawRefresh = request.COOKIES.get(Constants.CookieName.REFRESH_TOKEN)

        if rawRefresh:
            try:
                RefreshToken(rawRefresh).blacklist()
            except TokenError:
                # already expired or blacklisted
                pass

        utils.clear_hashed_refresh(request.user)

        response = Response(status=status.HTTP_200_OK)
        for name in (Constants.CookieName.ACCESS_TOKEN, Constants.CookieName.REFRESH_TOKEN):
            response.delete_cookie(name, path="/")

        return response


def setCookie(accessToken, refreshToken, user) -> Response:
    response = Response(UserModelSerializer(user).data, status=status.HTTP_200_OK)

    utils.set_token_cookie(
        response, Constants.CookieName.ACCESS_TOKEN, accessToken, Constants.ACCESS_TOKEN_LIFETIME
    )
    utils.set_token_cookie(
        response, Constants.CookieName.REFRESH_TOKEN, refreshToken, Constants.REFRESH_TOKEN_LIFETIME
    )

    return response
