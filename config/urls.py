from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("accounts.urls")),
    path("api/admin/", include("system_admin.urls")),
    path("api/admin/pricing/", include("billing.pricing_urls")),
    path("api/patients/", include("patients.urls")),
    path("api/appointments/", include("appointments.urls")),
    path("api/lab-orders/", include("labs.urls")),
    path("api/invoices/", include("billing.urls")),
    path("api/pharmacy/", include("pharmacy.urls")),
    path("api/wards/", include("facilities.urls")),
    path("api/admissions/", include("facilities.admission_urls")),
    path("api/consultations/", include("encounters.urls")),
    path("api/staff-schedule/", include("schedules.urls")),
    path("api/activity-log/", include("audit.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]
