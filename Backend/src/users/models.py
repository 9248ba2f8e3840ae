from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Utilisateur du back-office.

    - Herite d'AbstractUser (username, first_name, last_name, is_staff, etc.)
    - L'email sert d'identifiant de connexion (unique)
    - Les droits d'edition ne viennent pas d'ici mais de UserRole
    """

    email = models.EmailField("email", unique=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    def __str__(self) -> str:
        return self.email or self.username

    class Meta:
        verbose_name = "Utilisateur"
        verbose_name_plural = "Utilisateurs"
        ordering = ["id"]


class UserRole(models.Model):
    """Table des roles: une ligne par (utilisateur, role)."""

    ADMIN = "admin"
    EDITOR = "editor"
    ROLE_CHOICES = [
        (ADMIN, "Administrateur"),
        (EDITOR, "Éditeur"),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="roles")
    role = models.CharField(max_length=20, choices=ROLE_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.user} -> {self.role}"

    class Meta:
        verbose_name = "Rôle"
        verbose_name_plural = "Rôles"
        ordering = ["user", "role"]
        constraints = [
            models.UniqueConstraint(fields=["user", "role"], name="unique_user_role"),
        ]
