"""
Lecture des roles. Toujours relus en base: jamais mis en cache sur
l'utilisateur ni dans le token.
"""
from typing import List

from .models import UserRole


def get_roles(user) -> List[str]:
    if user is None or not user.is_authenticated:
        return []
    return list(UserRole.objects.filter(user_id=user.pk).values_list("role", flat=True))


def is_admin(user) -> bool:
    return UserRole.ADMIN in get_roles(user)


def is_editor(user) -> bool:
    roles = get_roles(user)
    return UserRole.ADMIN in roles or UserRole.EDITOR in roles
