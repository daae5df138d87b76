from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from accounts.permissions import IsAdminOrReadOnly, IsClinician
from .containers import AdmissionContainer, WardContainer
from .enums import AdmissionStatus
from .models import Admission, Bed, Ward
from .serializers import (
    AdmissionSerializer,
    AdmissionUpdateSerializer,
    BedSerializer,
    BedUpdateSerializer,
    DischargeSerializer,
    NewBedSerializer,
    TransferSerializer,
    WardSerializer,
    WardWriteSerializer,
)
from .services import wards
from .services.admissions import list_admissions


class WardViewSet(viewsets.GenericViewSet, mixins.ListModelMixin, mixins.RetrieveModelMixin):
    queryset = Ward.objects.all()
    serializer_class = WardSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated, IsAdminOrReadOnly]

    def get_queryset(self):
        return wards.list_wards()

    def create(self, request, *args, **kwargs):
        s = WardWriteSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        ward = WardContainer(actor=request.user).create(s.validated_data)
        return Response(WardSerializer(ward).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        s = WardWriteSerializer(data=request.data, partial=kwargs.pop("partial", False))
        s.is_valid(raise_exception=True)
        ward = WardContainer(actor=request.user).update(instance.pk, s.validated_data)
        return Response(WardSerializer(ward).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        WardContainer(actor=request.user).remove(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


class BedViewSet(viewsets.GenericViewSet, mixins.ListModelMixin, mixins.RetrieveModelMixin):
    """
    Beds of one ward: /wards/{ward_pk}/beds/.
    Adding or removing a bed answers with the whole updated ward.
    """
    serializer_class = BedSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated, IsAdminOrReadOnly]

    def get_queryset(self):
        return Bed.objects.filter(ward_id=self.kwargs["ward_pk"]).order_by("id")

    def create(self, request, ward_pk=None):
        s = NewBedSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        ward = WardContainer(actor=request.user).add_bed(ward_pk, s.validated_data["label"])
        return Response(WardSerializer(ward).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None, ward_pk=None):
        s = BedUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        bed = wards.update_bed(ward_pk, pk, s.validated_data)
        return Response(BedSerializer(bed).data)

    def destroy(self, request, pk=None, ward_pk=None):
        ward = WardContainer(actor=request.user).remove_bed(ward_pk, pk)
        return Response(WardSerializer(ward).data)


class AdmissionViewSet(viewsets.GenericViewSet, mixins.ListModelMixin, mixins.RetrieveModelMixin):
    queryset = Admission.objects.select_related("ward", "bed")
    serializer_class = AdmissionSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action in ("list", "retrieve", "statuses"):
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsClinician()]

    def get_queryset(self):
        qp = self.request.query_params
        return list_admissions(
            patient_id=qp.get("patient") or None,
            status=qp.get("status") or None,
            ward_id=qp.get("ward") or None,
        )

    def create(self, request, *args, **kwargs):
        s = AdmissionSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        admission = AdmissionContainer(actor=request.user).create(s.validated_data)
        return Response(AdmissionSerializer(admission).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):
        instance = self.get_object()
        s = AdmissionUpdateSerializer(instance, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        admission = AdmissionContainer(actor=request.user).update(instance.pk, s.validated_data)
        return Response(AdmissionSerializer(admission).data)

    @action(detail=True, methods=["post"])
    def discharge(self, request, pk=None):
        instance = self.get_object()
        s = DischargeSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        admission = AdmissionContainer(actor=request.user).discharge(instance.pk, s.validated_data.get("discharge_date"))
        return Response(AdmissionSerializer(admission).data)

    @action(detail=True, methods=["post"])
    def transfer(self, request, pk=None):
        """Body: {"bed": <new bed id>}"""
        instance = self.get_object()
        s = TransferSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        admission = AdmissionContainer(actor=request.user).transfer(instance.pk, s.validated_data["bed"].pk)
        return Response(AdmissionSerializer(admission).data)

    @action(detail=False, methods=["get"])
    def statuses(self, request):
        return Response([{"value": c, "label": l} for c, l in AdmissionStatus.choices])
