from base.constants import Constants
from base.utils import set_token_cookie

class RefreshCookieMiddleware:
    """
    Writes back the access token minted by RefreshAuthentication when the
    previous one had expired, and tells the client to drop its auth state
    when a protected endpoint was called without a valid session.
    """
    # login and sign-up are reachable without a session
    PUBLIC_ENDPOINTS = [("/api/sessions", "POST"), ("/api/users", "POST")]

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        # authenticate request
        response = self.get_response(request)

        # issue new access token if the current expired
        new_access = getattr(request, "_access", None)
        if new_access:
            set_token_cookie(response, Constants.CookieName.ACCESS_TOKEN, new_access, Constants.ACCESS_TOKEN_LIFETIME)

        self.check_auth_state_sync(request, response)

        return response

    def check_auth_state_sync(self, request, response):
        """
        Signal client to clear authentication state if server detects invalid session.
        """
        if not request.path.startswith("/api/"):
            return

        is_public_endpoint = any(
            request.path == path and request.method == method
            for path, method in self.PUBLIC_ENDPOINTS
        )
        if is_public_endpoint:
            return

        # DRF authenticates lazily on the wrapped request, the Django request
        # only knows the user once a view has resolved it
        user = getattr(request, "user", None)
        if response.status_code == 401 or (user is not None and not user.is_authenticated):
            response["X-Clear-Auth-State"] = "true"
