from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from .containers import PatientContainer
from .models import Patient
from .serializers import PatientSerializer
from .services import list_patients, unflatten_form


def form_payload(request) -> dict:
    """request.data with flat edit-form fields folded into sub-documents."""
    return unflatten_form({k: request.data[k] for k in request.data})


class PatientViewSet(viewsets.GenericViewSet,
                     mixins.RetrieveModelMixin,
                     mixins.ListModelMixin):
    queryset = Patient.objects.all().order_by("-created_at")
    serializer_class = PatientSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        qp = self.request.query_params
        return list_patients(
            search=(qp.get("s") or "").strip() or None,
            status=(qp.get("status") or "").strip() or None,
        )

    def create(self, request, *args, **kwargs):
        s = PatientSerializer(data=form_payload(request))
        s.is_valid(raise_exception=True)
        patient = PatientContainer(actor=request.user).create(s.validated_data)
        return Response(PatientSerializer(patient).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        partial = kwargs.pop("partial", False)
        s = PatientSerializer(instance, data=form_payload(request), partial=partial)
        s.is_valid(raise_exception=True)
        patient = PatientContainer(actor=request.user).update(instance.pk, s.validated_data)
        return Response(PatientSerializer(patient).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        PatientContainer(actor=request.user).remove(instance.pk)
        return Response({"message": "Patient deleted successfully."}, status=status.HTTP_200_OK)

    @action(detail=True, methods=["get"])
    def summary(self, request, pk=None):
        """Counts of the patient's linked records, for the profile header."""
        patient = self.get_object()
        return Response({
            "id": patient.id,
            "name": patient.name,
            "appointments": patient.appointments.count(),
            "lab_orders": patient.lab_orders.count(),
            "invoices": patient.invoices.count(),
            "prescriptions": patient.prescriptions.count(),
            "consultations": patient.consultations.count(),
        })
