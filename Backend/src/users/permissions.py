from rest_framework.permissions import BasePermission

from common.i18n import message, resolve_language
from .roles import is_admin, is_editor


class _RolePermission(BasePermission):
    """
    Non connecte -> False sans message: DRF repond 401 (redirection vers /auth).
    Connecte sans le role -> 403 "Acces restreint".
    """
    code = "restricted"

    def check(self, user) -> bool:
        raise NotImplementedError

    def has_permission(self, request, view) -> bool:
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if self.check(user):
            return True
        self.message = message("restricted", resolve_language(request))
        return False


class IsEditor(_RolePermission):
    def check(self, user) -> bool:
        return is_editor(user)


class IsAdmin(_RolePermission):
    def check(self, user) -> bool:
        return is_admin(user)
