from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from accounts.permissions import IsPharmacy
from .containers import MedicationContainer, PrescriptionContainer
from .enums import RxStatus
from .models import Medication, Prescription
from .serializers import MedicationSerializer, PrescriptionSerializer, StockAdjustSerializer
from .services.inventory import list_medications, low_stock
from .services.prescriptions import list_prescriptions


class ContainerViewSet(viewsets.GenericViewSet, mixins.ListModelMixin, mixins.RetrieveModelMixin):
    """CRUD routed through an entity container so every write is logged."""
    container_class = None
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def container(self):
        return self.container_class(actor=self.request.user)

    def create(self, request, *args, **kwargs):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        obj = self.container().create(s.validated_data)
        return Response(self.get_serializer(obj).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        s = self.get_serializer(instance, data=request.data, partial=kwargs.pop("partial", False))
        s.is_valid(raise_exception=True)
        obj = self.container().update(instance.pk, s.validated_data)
        return Response(self.get_serializer(obj).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.container().remove(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MedicationViewSet(ContainerViewSet):
    queryset = Medication.objects.all()
    serializer_class = MedicationSerializer
    container_class = MedicationContainer

    def get_permissions(self):
        if self.action in ("list", "retrieve", "low_stock"):
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsPharmacy()]

    def get_queryset(self):
        qp = self.request.query_params
        return list_medications(
            search=(qp.get("s") or "").strip() or None,
            status=qp.get("status") or None,
        )

    @action(detail=True, methods=["post"])
    def adjust(self, request, pk=None):
        """Body: {"delta": 25} to receive stock, {"delta": -3} to write it off."""
        instance = self.get_object()
        s = StockAdjustSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        med = self.container().adjust_stock(instance.pk, s.validated_data["delta"])
        return Response(MedicationSerializer(med).data)

    @action(detail=False, methods=["get"], url_path="low-stock")
    def low_stock(self, request):
        return Response(MedicationSerializer(low_stock(), many=True).data)


class PrescriptionViewSet(ContainerViewSet):
    queryset = Prescription.objects.all()
    serializer_class = PrescriptionSerializer
    container_class = PrescriptionContainer

    def get_queryset(self):
        qp = self.request.query_params
        return list_prescriptions(
            patient_id=qp.get("patient") or None,
            status=qp.get("status") or None,
        )

    @action(detail=True, methods=["post"], permission_classes=[IsAuthenticated, IsPharmacy])
    def dispense(self, request, pk=None):
        rx = self.container().dispense(self.get_object().pk)
        return Response(PrescriptionSerializer(rx).data)

    @action(detail=True, methods=["post"], permission_classes=[IsAuthenticated, IsPharmacy])
    def refill(self, request, pk=None):
        rx = self.container().refill(self.get_object().pk)
        return Response(PrescriptionSerializer(rx).data)

    @action(detail=True, methods=["post"])
    def bill(self, request, pk=None):
        rx = self.container().bill(self.get_object().pk)
        return Response(PrescriptionSerializer(rx).data)

    @action(detail=False, methods=["get"])
    def statuses(self, request):
        return Response([{"value": c, "label": l} for c, l in RxStatus.choices])
