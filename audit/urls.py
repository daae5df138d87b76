from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import ActivityLogViewSet

router = SimpleRouter()
router.register("", ActivityLogViewSet, basename="activity-log")

urlpatterns = [
    path("", include(router.urls)),
]
