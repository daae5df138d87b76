from django.urls import path, include
from rest_framework.routers import SimpleRouter
from rest_framework_nested.routers import NestedSimpleRouter
from .views import WardViewSet, BedViewSet

router = SimpleRouter()
router.register("", WardViewSet, basename="ward")

beds_router = NestedSimpleRouter(router, "", lookup="ward")
beds_router.register("beds", BedViewSet, basename="ward-beds")

urlpatterns = [
    path("", include(router.urls)),
    path("", include(beds_router.urls)),
]
