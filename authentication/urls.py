from django.urls import path

from .session_view import SessionViewSet

urlpatterns = [
    path("sessions", SessionViewSet.as_view({"post": "login"}), name="sessions"),
    path(
        "sessions/current",
        SessionViewSet.as_view({"get": "current", "delete": "logout"}),
        name="session-current",
    ),
]
