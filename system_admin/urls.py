from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import UserAdminViewSet, app_settings, reset_theme

router = DefaultRouter()
router.register(r"users", UserAdminViewSet, basename="system-admin-users")

urlpatterns = [
    path("settings/", app_settings, name="system-admin-settings"),
    path("settings/reset-theme/", reset_theme, name="system-admin-reset-theme"),
    path("", include(router.urls)),
]
