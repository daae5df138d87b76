from rest_framework.permissions import BasePermission, SAFE_METHODS
from .enums import UserRole

class IsRole(BasePermission):
    required_roles: tuple[str,...] = ()
    def has_permission(self, request, view):
        u = request.user
        if not (u and u.is_authenticated):
            return False
        return u.is_superuser or u.role in self.required_roles

class IsAdmin(IsRole):        required_roles = (UserRole.ADMINISTRATOR,)
class IsClinician(IsRole):    required_roles = (UserRole.ADMINISTRATOR, UserRole.DOCTOR, UserRole.NURSE)
class IsLab(IsRole):          required_roles = (UserRole.ADMINISTRATOR, UserRole.LAB_TECHNICIAN, UserRole.DOCTOR)
class IsPharmacy(IsRole):     required_roles = (UserRole.ADMINISTRATOR, UserRole.PHARMACIST, UserRole.DOCTOR)

class IsAdminOrReadOnly(IsAdmin):
    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return super().has_permission(request, view)
