from core.containers import EntityContainer

from .models import User
from .services import users


class UserContainer(EntityContainer):
    """
    Staff directory for the session. Pages that need the user list subscribe
    to an instance of this instead of keeping their own copy.
    """
    model = User
    entity_type = "User"

    def load(self, **filters):
        return users.list_users(**filters)

    def create_entity(self, data):
        return users.create_user(data)

    def update_entity(self, pk, data):
        return users.update_user(pk, data)

    def delete_entity(self, pk):
        users.delete_user(pk)

    def describe_created(self, entity):
        return f"Created user {entity.display_name} ({entity.get_role_display()})", "UserPlus"

    def describe_updated(self, entity, data):
        return f"Updated user {entity.display_name}", "UserCog"

    def describe_removed(self, pk, entity):
        return f"Deleted user with ID: {pk}", "UserMinus"

    def link_for(self, pk):
        return f"/dashboard/admin/user-management/{pk}/edit"

    def matches(self, instance):
        # filters are role/status/search; only role and status are row attributes
        role = self._filters.get("role")
        status = self._filters.get("status")
        return (not role or instance.role == role) and (not status or instance.status == status)
