from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from common.i18n import message
from .models import UserRole
from .roles import get_roles

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Profil de l'utilisateur courant, avec ses roles relus en base."""

    roles = serializers.SerializerMethodField()
    is_admin = serializers.SerializerMethodField()
    is_editor = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "email", "first_name", "last_name", "roles", "is_admin", "is_editor"]
        read_only_fields = ["id", "email"]

    def get_roles(self, obj):
        return sorted(get_roles(obj))

    def get_is_admin(self, obj):
        return UserRole.ADMIN in get_roles(obj)

    def get_is_editor(self, obj):
        roles = get_roles(obj)
        return UserRole.ADMIN in roles or UserRole.EDITOR in roles


class RegisterSerializer(serializers.ModelSerializer):
    """Inscription: cree un compte sans aucun role."""

    password = serializers.CharField(write_only=True, required=True, trim_whitespace=False)

    class Meta:
        model = User
        fields = ["id", "email", "password", "first_name", "last_name"]
        read_only_fields = ["id"]

    def validate_email(self, value: str) -> str:
        return value.strip().lower()

    def validate_password(self, value: str) -> str:
        validate_password(value)
        return value

    def create(self, validated_data):
        password = validated_data.pop("password")
        user = User(username=validated_data["email"][:150], **validated_data)
        user.set_password(password)
        user.save()
        return user


class EmailTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Connexion par email; renvoie aussi le profil (roles compris)."""

    default_error_messages = {
        "no_active_account": message("auth.bad_credentials", "fr"),
    }

    def validate(self, attrs):
        data = super().validate(attrs)
        data["user"] = UserSerializer(self.user).data
        return data


class ChangePasswordSerializer(serializers.Serializer):
    """Serializer pour changer le mot de passe de l'utilisateur connecte."""

    old_password = serializers.CharField(write_only=True, required=True, trim_whitespace=False)
    new_password = serializers.CharField(write_only=True, required=True, trim_whitespace=False)

    def validate(self, attrs):
        user = self.context["request"].user
        if not user.check_password(attrs["old_password"]):
            raise serializers.ValidationError({"old_password": message("auth.bad_password", self.context.get("lang"))})
        validate_password(attrs["new_password"], user)
        return attrs

    def save(self, **kwargs):
        user = self.context["request"].user
        user.set_password(self.validated_data["new_password"])
        user.save()
        return user


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField()


class UserRoleSerializer(serializers.ModelSerializer):
    """Attribution d'un role par email de l'utilisateur."""

    email = serializers.EmailField(write_only=True)
    user_email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = UserRole
        fields = ["id", "email", "user_email", "role", "created_at"]
        read_only_fields = ["id", "user_email", "created_at"]

    def validate(self, attrs):
        email = attrs.pop("email").strip().lower()
        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            raise serializers.ValidationError({"email": message("role.unknown_user", self.context.get("lang"))})
        attrs["user"] = user
        return attrs

    def create(self, validated_data):
        role, _ = UserRole.objects.get_or_create(**validated_data)
        return role
