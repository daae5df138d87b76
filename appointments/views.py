from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from .containers import AppointmentContainer
from .enums import ApptStatus, ApptType
from .models import Appointment
from .serializers import AppointmentSerializer
from .services.booking import list_appointments


class AppointmentViewSet(
    viewsets.GenericViewSet,
    mixins.RetrieveModelMixin,
    mixins.ListModelMixin,
):
    queryset = Appointment.objects.select_related("patient", "provider", "invoice")
    serializer_class = AppointmentSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        qp = self.request.query_params
        return list_appointments(
            patient_id=qp.get("patient") or None,
            provider_id=qp.get("provider") or None,
            date=qp.get("date") or None,
            status=qp.get("status") or None,
        )

    def create(self, request, *args, **kwargs):
        s = AppointmentSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        appt = AppointmentContainer(actor=request.user).create(s.validated_data)
        return Response(AppointmentSerializer(appt).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        s = AppointmentSerializer(instance, data=request.data, partial=kwargs.pop("partial", False))
        s.is_valid(raise_exception=True)
        appt = AppointmentContainer(actor=request.user).update(instance.pk, s.validated_data)
        return Response(AppointmentSerializer(appt).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        AppointmentContainer(actor=request.user).remove(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):
        instance = self.get_object()
        appt = AppointmentContainer(actor=request.user).cancel(instance.pk)
        return Response(AppointmentSerializer(appt).data)

    @action(detail=False, methods=["get"])
    def choices(self, request):
        return Response({
            "types": [{"value": c, "label": l} for c, l in ApptType.choices],
            "statuses": [{"value": c, "label": l} for c, l in ApptStatus.choices],
        })
