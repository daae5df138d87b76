from rest_framework.routers import SimpleRouter
from .views import ShiftViewSet

router = SimpleRouter()
router.register("", ShiftViewSet, basename="shift")
urlpatterns = router.urls
