from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from accounts.permissions import IsLab
from .containers import LabOrderContainer
from .enums import LabStatus
from .models import LabOrder
from .serializers import LabOrderSerializer, ResultsEntrySerializer
from .services.orders import list_lab_orders


class LabOrderViewSet(viewsets.GenericViewSet, mixins.ListModelMixin, mixins.RetrieveModelMixin):
    queryset = LabOrder.objects.all()
    serializer_class = LabOrderSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        qp = self.request.query_params
        return list_lab_orders(
            patient_id=qp.get("patient") or None,
            status=qp.get("status") or None,
        )

    def create(self, request, *args, **kwargs):
        s = LabOrderSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        order = LabOrderContainer(actor=request.user).create(s.validated_data)
        return Response(LabOrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        s = LabOrderSerializer(instance, data=request.data, partial=kwargs.pop("partial", False))
        s.is_valid(raise_exception=True)
        order = LabOrderContainer(actor=request.user).update(instance.pk, s.validated_data)
        return Response(LabOrderSerializer(order).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        LabOrderContainer(actor=request.user).remove(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"], permission_classes=[IsAuthenticated, IsLab])
    def results(self, request, pk=None):
        """
        Enter results for the order's tests.
        Body: {"tests": [{id, name, status, result, reference_range, unit, notes}, ...]}
        """
        instance = self.get_object()
        s = ResultsEntrySerializer(data=request.data)
        s.is_valid(raise_exception=True)
        order = LabOrderContainer(actor=request.user).enter_results(instance.pk, s.validated_data["tests"])
        return Response(LabOrderSerializer(order).data)

    @action(detail=False, methods=["get"])
    def statuses(self, request):
        return Response([{"value": c, "label": l} for c, l in LabStatus.choices])
