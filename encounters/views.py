from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from accounts.permissions import IsClinician
from .containers import ConsultationContainer
from .models import Consultation
from .serializers import ConsultationSerializer
from .services import list_consultations


class ConsultationViewSet(viewsets.GenericViewSet, mixins.ListModelMixin, mixins.RetrieveModelMixin):
    queryset = Consultation.objects.all()
    serializer_class = ConsultationSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action in ("create", "update", "partial_update"):
            return [IsAuthenticated(), IsClinician()]
        return super().get_permissions()

    def get_queryset(self):
        qp = self.request.query_params
        return list_consultations(
            patient_id=qp.get("patient") or None,
            status=qp.get("status") or None,
        )

    def create(self, request, *args, **kwargs):
        s = ConsultationSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        note = ConsultationContainer(actor=request.user).create(s.validated_data)
        return Response(ConsultationSerializer(note).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        s = ConsultationSerializer(instance, data=request.data, partial=kwargs.pop("partial", False))
        s.is_valid(raise_exception=True)
        note = ConsultationContainer(actor=request.user).update(instance.pk, s.validated_data)
        return Response(ConsultationSerializer(note).data)

    def partial_update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return self.update(request, *args, **kwargs)
