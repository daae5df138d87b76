from rest_framework import permissions
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from .authentication import HeaderJWTAuthentication

from audit.services import log_activity
from .serializers import LoginSerializer, UserSerializer
from .models import User

def _jwt_pair_for(user: User) -> dict:
    refresh = RefreshToken.for_user(user)
    return {"access": str(refresh.access_token), "refresh": str(refresh)}

@api_view(["GET"])
@authentication_classes([HeaderJWTAuthentication])
@permission_classes([permissions.IsAuthenticated])
def me(request):
    """
    Return the currently authenticated user.
    Used by the dashboards for greetings and role-specific views.
    """
    return Response(UserSerializer(request.user).data)

@api_view(["POST"])
@authentication_classes([])
@permission_classes([permissions.AllowAny])
def login_password(request):
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = s.validated_data["user"]
    log_activity(actor=user, action=f"{user.display_name} signed in", target_type="User", target_id=user.pk, icon="LogIn")
    return Response({"tokens": _jwt_pair_for(user), "user": UserSerializer(user).data})
