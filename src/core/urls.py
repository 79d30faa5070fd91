"""Root URL configuration for the blog API."""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path("api/", include("authentication.urls")),
    path("api/", include("articles.urls")),
    path("api/schema", SpectacularAPIView.as_view(), name="schema"),
]

handler404 = "core.response.not_found"
handler500 = "core.response.server_error"
