from rest_framework.routers import SimpleRouter
from .views import LabOrderViewSet

router = SimpleRouter()
router.register("", LabOrderViewSet, basename="lab-orders")
urlpatterns = router.urls
