from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from accounts.permissions import IsAdmin
from .containers import ShiftContainer
from .models import Shift
from .serializers import AttendanceSerializer, ShiftSerializer
from .services import list_shifts, todays_shift


def _flag(value) -> bool:
    return value in ("true", "True", "1")


class ShiftViewSet(viewsets.GenericViewSet, mixins.RetrieveModelMixin):
    queryset = Shift.objects.all()
    serializer_class = ShiftSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action in ("create", "update", "partial_update", "destroy"):
            return [IsAuthenticated(), IsAdmin()]
        return super().get_permissions()

    def get_queryset(self):
        qp = self.request.query_params
        return list_shifts(
            date=qp.get("date") or None,
            staff_id=qp.get("staff") or None,
            exclude_day_off=_flag(qp.get("exclude_day_off")),
        )

    def list(self, request, *args, **kwargs):
        """
        ?date=YYYY-MM-DD&staff=<id>&exclude_day_off=true
        With all three the answer is that one shift, or null.
        """
        qp = request.query_params
        qs = self.get_queryset()
        if qp.get("date") and qp.get("staff") and _flag(qp.get("exclude_day_off")):
            shift = qs.first()
            return Response(ShiftSerializer(shift).data if shift else None)
        return Response(ShiftSerializer(qs, many=True).data)

    def create(self, request, *args, **kwargs):
        s = ShiftSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        shift = ShiftContainer(actor=request.user).create(s.validated_data)
        return Response(ShiftSerializer(shift).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        s = ShiftSerializer(instance, data=request.data, partial=kwargs.pop("partial", False))
        s.is_valid(raise_exception=True)
        shift = ShiftContainer(actor=request.user).update(instance.pk, s.validated_data)
        return Response(ShiftSerializer(shift).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        ShiftContainer(actor=request.user).remove(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["patch"])
    def attendance(self, request, pk=None):
        instance = self.get_object()
        s = AttendanceSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        shift = ShiftContainer(actor=request.user).record_attendance(instance.pk, s.validated_data)
        return Response(ShiftSerializer(shift).data)

    @action(detail=False, methods=["get"])
    def today(self, request):
        shift = todays_shift(request.user.pk)
        return Response(ShiftSerializer(shift).data if shift else None)

    @action(detail=False, methods=["post"])
    def clock(self, request):
        """Clock the current user in or out of today's shift."""
        shift = todays_shift(request.user.pk)
        if shift is None:
            return Response({"message": "No shift scheduled for today."}, status=status.HTTP_404_NOT_FOUND)
        shift = ShiftContainer(actor=request.user).clock(shift.pk)
        return Response(ShiftSerializer(shift).data)
