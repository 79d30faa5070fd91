"""URL patterns for user endpoints."""

from django.urls import path

from .views import CurrentUserView, LoginView, RegistrationView

urlpatterns = [
    path("users", RegistrationView.as_view(), name="user-registration"),
    path("users/login", LoginView.as_view(), name="user-login"),
    path("user", CurrentUserView.as_view(), name="current-user"),
]
