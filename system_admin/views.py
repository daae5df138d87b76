from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from accounts.authentication import HeaderJWTAuthentication

from accounts.containers import UserContainer
from accounts.permissions import IsAdmin, IsAdminOrReadOnly
from accounts.serializers import UserSerializer, UserCreateSerializer, UserUpdateSerializer
from accounts.services.users import list_users
from accounts.enums import UserRole, UserStatus
from audit.services import log_activity
from .serializers import AppSettingsSerializer
from .services import SettingsStore


class UserAdminViewSet(
    viewsets.GenericViewSet,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
):
    """Application-level user management."""
    authentication_classes = [HeaderJWTAuthentication]
    permission_classes = [IsAuthenticated, IsAdmin]
    serializer_class = UserSerializer

    def get_queryset(self):
        qp = self.request.query_params
        return list_users(
            role=(qp.get("role") or "").strip() or None,
            status=(qp.get("status") or "").strip() or None,
            search=(qp.get("q") or "").strip() or None,
        )

    def create(self, request, *args, **kwargs):
        s = UserCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        user = UserContainer(actor=request.user).create(s.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):
        instance = self.get_object()
        s = UserUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        user = UserContainer(actor=request.user).update(instance.pk, s.validated_data)
        return Response(UserSerializer(user).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        UserContainer(actor=request.user).remove(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"])
    def roles(self, request):
        return Response({
            "roles": [{"value": c, "label": l} for c, l in UserRole.choices],
            "statuses": [{"value": c, "label": l} for c, l in UserStatus.choices],
        })


@api_view(["GET", "PATCH"])
@permission_classes([IsAuthenticated, IsAdminOrReadOnly])
def app_settings(request):
    store = SettingsStore()
    if request.method == "GET":
        return Response(store.as_dict())

    s = AppSettingsSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    values = dict(s.validated_data)
    if "theme_colors" in values:
        values["theme_colors"] = s.merged_theme(store["theme_colors"])
    store.update(values)
    log_activity(actor=request.user, action=f"Updated system settings: {', '.join(sorted(values))}", target_type="Settings", icon="Settings")
    return Response(store.as_dict())


@api_view(["POST"])
@permission_classes([IsAuthenticated, IsAdmin])
def reset_theme(request):
    store = SettingsStore()
    store.reset_theme()
    log_activity(actor=request.user, action="Reset theme colours to defaults", target_type="Settings", icon="Palette")
    return Response(store.as_dict())
