from rest_framework import viewsets, mixins, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from .serializers import ActivityLogSerializer
from .services import log_activity, recent_activity


class ActivityLogViewSet(viewsets.GenericViewSet, mixins.ListModelMixin, mixins.CreateModelMixin):
    """
    GET  /api/activity-log/?limit=&role=&entity_type=   newest entries first
    POST /api/activity-log/                              append an entry
    """
    serializer_class = ActivityLogSerializer
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def list(self, request, *args, **kwargs):
        qp = request.query_params
        try:
            limit = int(qp.get("limit") or 0)
        except ValueError:
            limit = 0
        entries = recent_activity(
            limit=limit if limit > 0 else None,
            role=(qp.get("role") or "").strip() or None,
            entity_type=(qp.get("entity_type") or "").strip() or None,
        )
        return Response(ActivityLogSerializer(entries, many=True).data)

    def create(self, request, *args, **kwargs):
        s = ActivityLogSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data
        entry = log_activity(
            action=data["action"],
            actor=request.user,
            actor_name=data["actor_name"],
            actor_role=data.get("actor_role"),
            target_type=data.get("target_type", ""),
            target_id=data.get("target_id", ""),
            link=data.get("target_link", ""),
            icon=data.get("icon", ""),
            details=data.get("details"),
        )
        if entry is None:
            return Response({"message": "Failed to write activity log entry."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(ActivityLogSerializer(entry).data, status=status.HTTP_201_CREATED)
