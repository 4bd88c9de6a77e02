from django.urls import include, path

from .health_check_view import health

urlpatterns = [
    path("api/", include("api.urls")),
    path("api/", include("authentication.urls")),
    path("health", health, name="health"),
]
