import logging

from django.contrib.auth import get_user_model
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.generics import CreateAPIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenObtainPairView

from common.i18n import message, resolve_language
from .models import UserRole
from .permissions import IsAdmin
from .serializers import (
    ChangePasswordSerializer,
    EmailTokenObtainPairSerializer,
    LogoutSerializer,
    RegisterSerializer,
    UserRoleSerializer,
    UserSerializer,
)

User = get_user_model()
logger = logging.getLogger(__name__)


class RegisterView(CreateAPIView):
    """Inscription ouverte: cree un utilisateur (sans role) et renvoie son profil."""

    serializer_class = RegisterSerializer
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("Compte cree (id=%s)", user.pk)
        return Response(
            {"detail": message("auth.registered", resolve_language(request)), "item": UserSerializer(user).data},
            status=status.HTTP_201_CREATED,
        )


class LoginView(TokenObtainPairView):
    serializer_class = EmailTokenObtainPairSerializer


class LogoutView(APIView):
    """Deconnexion: le refresh token est mis en liste noire."""

    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            RefreshToken(serializer.validated_data["refresh"]).blacklist()
        except TokenError as exc:
            raise ValidationError({"refresh": str(exc)})
        return Response({"detail": message("auth.logged_out", resolve_language(request))})


class MeView(APIView):
    """Session courante: profil + roles (relus a chaque appel)."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def patch(self, request):
        serializer = UserSerializer(instance=request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)


class ChangePasswordView(APIView):
    """Permet a l'utilisateur connecte de changer son mot de passe."""

    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        lang = resolve_language(request)
        serializer = ChangePasswordSerializer(data=request.data, context={"request": request, "lang": lang})
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"detail": message("auth.password_changed", lang)}, status=status.HTTP_200_OK)


class RoleViewSet(mixins.ListModelMixin,
                  mixins.CreateModelMixin,
                  mixins.DestroyModelMixin,
                  viewsets.GenericViewSet):
    """Gestion des roles (administrateurs uniquement)."""

    queryset = UserRole.objects.select_related("user")
    serializer_class = UserRoleSerializer
    permission_classes = [IsAdmin]

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["lang"] = resolve_language(self.request)
        return context

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        role = serializer.save()
        logger.info("Role %s attribue a l'utilisateur %s", role.role, role.user_id)
        return Response(
            {"detail": message("role.granted", resolve_language(request)), "item": self.get_serializer(role).data},
            status=status.HTTP_201_CREATED,
        )

    def destroy(self, request, *args, **kwargs):
        role = self.get_object()
        logger.info("Role %s retire a l'utilisateur %s", role.role, role.user_id)
        role.delete()
        return Response({"detail": message("role.revoked", resolve_language(request))})
