import logging
from functools import partial

from django.conf import settings
from django.db import transaction
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from common import storage
from common.exceptions import UploadRejected
from common.i18n import message, resolve_language
from common.viewsets import MessageMixin, ToggleMixin
from users.permissions import IsEditor
from .exports import csv_response, messages_frame, subscribers_frame
from .models import ContactMessage, NewsletterSubscriber
from .serializers import ContactMessageSerializer, ContactSubmitSerializer, NewsletterSubscriberSerializer
from .tasks import notify_new_message

logger = logging.getLogger(__name__)

ATTACHMENT_TYPES = (
    "application/pdf",
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/gif",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.oasis.opendocument.text",
    "text/plain",
)


class ContactSubmitView(APIView):
    """
    POST /api/public/contact/
    La piece jointe est envoyee au stockage avant l'enregistrement du message.
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "contact"
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        lang = resolve_language(request)
        serializer = ContactSubmitSerializer(data=request.data, context={"lang": lang})
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        attachment = {}
        upfile = data.get("attachment")
        if upfile:
            content_type = (upfile.content_type or "").lower()
            if content_type not in ATTACHMENT_TYPES:
                raise UploadRejected(message("contact.attachment_bad_type", lang))
            if upfile.size > settings.ATTACHMENT_MAX_BYTES:
                raise UploadRejected(message("contact.attachment_too_large", lang))
            path = storage.upload("attachments", storage.unique_name(upfile.name), upfile, content_type)
            attachment = {
                "attachment_url": storage.public_url("attachments", path),
                "attachment_name": upfile.name,
                "attachment_size": upfile.size,
            }

        email = data["email"].strip().lower()
        with transaction.atomic():
            msg = ContactMessage.objects.create(
                name=data["name"].strip(),
                email=email,
                subject=data["subject"].strip(),
                message=data["message"].strip(),
                newsletter_optin=data["newsletter"],
                **attachment,
            )
            if data["newsletter"]:
                NewsletterSubscriber.objects.update_or_create(
                    email=email,
                    defaults={"name": msg.name, "language": lang, "active": True},
                )
            transaction.on_commit(partial(notify_new_message.delay, msg.pk), robust=True)

        logger.info("Message de contact recu (id=%s)", msg.pk)
        return Response({"detail": message("contact.sent", lang), "id": msg.pk}, status=status.HTTP_201_CREATED)


class MessageAdminViewSet(MessageMixin,
                          mixins.ListModelMixin,
                          mixins.RetrieveModelMixin,
                          mixins.DestroyModelMixin,
                          viewsets.GenericViewSet):
    """Boite de reception du secretariat."""

    queryset = ContactMessage.objects.order_by("-created_at", "-id")
    serializer_class = ContactMessageSerializer
    permission_classes = [IsEditor]
    message_key = "message"

    def retrieve(self, request, *args, **kwargs):
        instance = self.get_object()
        if not instance.read:
            instance.read = True
            instance.save(update_fields=["read"])
        return Response(self.get_serializer(instance).data)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        path = storage.path_from_public_url("attachments", instance.attachment_url)
        pk = instance.pk
        instance.delete()
        if path:
            storage.remove("attachments", [path])
        logger.info("Message supprime (id=%s)", pk)
        return Response({"detail": self.msg("deleted")})

    @action(detail=True, methods=["post"])
    def read(self, request, pk=None):
        instance = self.get_object()
        instance.read = True
        instance.save(update_fields=["read"])
        return Response({"detail": self.msg("read"), "item": self.get_serializer(instance).data})

    @action(detail=False, methods=["post"], url_path="read-all")
    def read_all(self, request):
        updated = ContactMessage.objects.filter(read=False).update(read=True)
        logger.info("%s message(s) marque(s) comme lu(s)", updated)
        return Response({"detail": self.msg("read_all"), "updated": updated})

    @action(detail=False, methods=["get"])
    def export(self, request):
        return csv_response(messages_frame(self.get_queryset()), "messages")


class SubscriberAdminViewSet(ToggleMixin,
                             mixins.ListModelMixin,
                             mixins.DestroyModelMixin,
                             viewsets.GenericViewSet):
    queryset = NewsletterSubscriber.objects.order_by("-created_at", "-id")
    serializer_class = NewsletterSubscriberSerializer
    permission_classes = [IsEditor]
    message_key = "subscriber"

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        logger.info("Abonne supprime (id=%s)", instance.pk)
        instance.delete()
        return Response({"detail": self.msg("deleted")})

    @action(detail=False, methods=["get"])
    def export(self, request):
        return csv_response(subscribers_frame(self.get_queryset()), "abonnes")


@api_view(["GET"])
@permission_classes([IsEditor])
def stats(request):
    """Compteurs du tableau de bord."""
    return Response({
        "messages": ContactMessage.objects.count(),
        "unread": ContactMessage.objects.filter(read=False).count(),
        "subscribers": NewsletterSubscriber.objects.count(),
        "active_subscribers": NewsletterSubscriber.objects.filter(active=True).count(),
    })
