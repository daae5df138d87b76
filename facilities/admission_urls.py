from rest_framework.routers import SimpleRouter
from .views import AdmissionViewSet

router = SimpleRouter()
router.register("", AdmissionViewSet, basename="admission")
urlpatterns = router.urls
