from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from . import views

urlpatterns = [
    path("login/", views.login_password, name="auth-login"),
    path("me/", views.me, name="auth-me"),
    path("token/refresh/", TokenRefreshView.as_view(), name="auth-token-refresh"),
]
