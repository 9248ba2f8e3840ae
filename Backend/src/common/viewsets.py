import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from users.permissions import IsEditor
from .i18n import message, resolve_language

logger = logging.getLogger(__name__)


class MessageMixin:
    """
    Messages de confirmation localises.
    `message_key` sert de prefixe aux cles du catalogue (article.created, ...).
    """
    message_key = None

    def lang(self):
        return resolve_language(self.request)

    def msg(self, suffix, **params):
        return message(f"{self.message_key}.{suffix}", self.lang(), **params)


class ToggleMixin(MessageMixin):
    """POST <id>/toggle/ bascule `toggle_field` et rien d'autre."""
    toggle_field = "active"

    @action(detail=True, methods=["post"])
    def toggle(self, request, pk=None):
        instance = self.get_object()
        value = not getattr(instance, self.toggle_field)
        setattr(instance, self.toggle_field, value)
        # seul le drapeau (et updated_at s'il existe) est ecrit
        fields = [self.toggle_field]
        if hasattr(instance, "updated_at"):
            fields.append("updated_at")
        instance.save(update_fields=fields)
        logger.info("%s %s=%s (id=%s)", self.message_key, self.toggle_field, value, instance.pk)
        return Response({
            "detail": self.msg("toggle_on" if value else "toggle_off"),
            "item": self.get_serializer(instance).data,
        })


class CrudViewSet(ToggleMixin, viewsets.ModelViewSet):
    """
    Contrat commun des ecrans d'administration:
    liste triee -> fiche -> validation -> ecriture -> message de confirmation.

    Les ecritures renvoient {"detail": <message localise>, "item": <ligne>}.
    """
    permission_classes = [IsEditor]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        logger.info("%s cree (id=%s)", self.message_key, serializer.instance.pk)
        return Response({"detail": self.msg("created"), "item": serializer.data}, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        logger.info("%s mis a jour (id=%s)", self.message_key, instance.pk)
        return Response({"detail": self.msg("updated"), "item": serializer.data})

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        pk = instance.pk
        self.perform_destroy(instance)
        logger.info("%s supprime (id=%s)", self.message_key, pk)
        return Response({"detail": self.msg("deleted")})
