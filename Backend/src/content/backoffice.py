"""Ecrans d'administration des contenus (/api/admin/...)."""
import logging
import os

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response

from common import storage
from common.exceptions import UploadRejected
from common.text import generate_slug
from common.viewsets import CrudViewSet
from users.permissions import IsEditor
from .models import Article, AudioFile, FooterLink, MassSchedule, Page, SocialLink, TeamMember
from .serializers import (
    ArticleAdminSerializer,
    AudioFileAdminSerializer,
    EventAdminSerializer,
    FooterLinkAdminSerializer,
    PageAdminSerializer,
    ScheduleAdminSerializer,
    SocialLinkAdminSerializer,
    TeamMemberAdminSerializer,
)

logger = logging.getLogger(__name__)

AUDIO_TYPES = ("audio/mpeg", "audio/mp3", "audio/wav", "audio/ogg", "audio/m4a", "audio/x-m4a")


class ArticleAdminViewSet(CrudViewSet):
    queryset = Article.objects.order_by("-created_at")
    serializer_class = ArticleAdminSerializer
    message_key = "article"
    toggle_field = "published"


class PageAdminViewSet(CrudViewSet):
    queryset = Page.objects.order_by("title")
    serializer_class = PageAdminSerializer
    message_key = "page"
    toggle_field = "published"


class TeamMemberAdminViewSet(CrudViewSet):
    queryset = TeamMember.objects.order_by("category", "sort_order")
    serializer_class = TeamMemberAdminSerializer
    message_key = "team"


class ScheduleAdminViewSet(CrudViewSet):
    queryset = MassSchedule.objects.filter(is_special=False).order_by("sort_order", "day_of_week")
    serializer_class = ScheduleAdminSerializer
    message_key = "schedule"


class EventAdminViewSet(CrudViewSet):
    queryset = MassSchedule.objects.filter(is_special=True).order_by("special_date")
    serializer_class = EventAdminSerializer
    message_key = "event"


class AudioFileAdminViewSet(CrudViewSet):
    queryset = AudioFile.objects.order_by("sort_order")
    serializer_class = AudioFileAdminSerializer
    message_key = "audio"

    def perform_destroy(self, instance):
        path = storage.path_from_public_url("audio", instance.file_url)
        instance.delete()
        if path:
            storage.remove("audio", [path])

    @action(detail=False, methods=["post"], parser_classes=[MultiPartParser, FormParser])
    def upload(self, request):
        """Envoi du fichier audio (podcasts/) avant creation de la fiche."""
        upfile = request.FILES.get("file")
        content_type = (getattr(upfile, "content_type", "") or "").lower()
        if not upfile or content_type not in AUDIO_TYPES:
            raise UploadRejected(self.msg("bad_type"))
        if upfile.size > settings.AUDIO_MAX_BYTES:
            raise UploadRejected(self.msg("too_large"))

        path = storage.upload("audio", f"podcasts/{storage.unique_name(upfile.name)}", upfile, content_type)
        logger.info("Audio envoye: %s (%s octets)", path, upfile.size)
        return Response(
            {
                "detail": self.msg("uploaded"),
                "url": storage.public_url("audio", path),
                "path": path,
                "title": os.path.splitext(upfile.name)[0],
                "file_size": upfile.size,
                "content_type": content_type,
            },
            status=status.HTTP_201_CREATED,
        )


class SocialLinkAdminViewSet(CrudViewSet):
    queryset = SocialLink.objects.order_by("sort_order")
    serializer_class = SocialLinkAdminSerializer
    message_key = "social"


class FooterLinkAdminViewSet(CrudViewSet):
    queryset = FooterLink.objects.order_by("sort_order")
    serializer_class = FooterLinkAdminSerializer
    message_key = "footer"


@api_view(["GET"])
@permission_classes([IsEditor])
def slug_preview(request):
    """GET /api/admin/slug/?title=... -> {"slug": ...}"""
    return Response({"slug": generate_slug(request.query_params.get("title", ""))})
