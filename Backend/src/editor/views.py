import html
import logging
import re

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from common import storage
from common.exceptions import UploadRejected
from common.i18n import message, resolve_language
from users.permissions import IsEditor
from .embeds import build_embed
from .images import FORM_IMAGE_TYPES, base_name, check_image, compress_image
from .sanitize import sanitize_html

logger = logging.getLogger(__name__)

_FOLDER_RE = re.compile(r"[^a-z0-9_/-]")

EXTENSIONS = {"image/jpeg": "jpg", "image/png": "png", "image/webp": "webp", "image/gif": "gif"}


@api_view(["POST"])
@parser_classes([MultiPartParser, FormParser])
@permission_classes([IsEditor])
def editor_image_upload(request):
    """Image inseree dans le contenu riche: compressee puis stockee sous media/articles/."""
    lang = resolve_language(request)
    upfile = request.FILES.get("file")
    if not upfile:
        raise UploadRejected(message("image.not_image", lang))
    check_image(upfile, lang)

    content, ext, content_type = compress_image(upfile, lang)
    path = storage.upload("media", f"articles/{storage.unique_name(base_name(upfile.name) + '.' + ext)}", content, content_type)
    url = storage.public_url("media", path)
    snippet = sanitize_html(f'<img src="{html.escape(url, quote=True)}" alt="{html.escape(upfile.name or "", quote=True)}">')
    return Response(
        {"detail": message("image.uploaded", lang), "url": url, "path": path, "html": snippet},
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
@parser_classes([MultiPartParser, FormParser])
@permission_classes([IsEditor])
def form_image_upload(request):
    """Image d'un champ de formulaire (photo, illustration), sans compression."""
    lang = resolve_language(request)
    upfile = request.FILES.get("file")
    if not upfile:
        raise UploadRejected(message("image.bad_type", lang))
    check_image(upfile, lang, allowed_types=FORM_IMAGE_TYPES)

    folder = _FOLDER_RE.sub("", (request.data.get("folder") or "uploads").lower()).strip("/") or "uploads"
    content_type = upfile.content_type.lower()
    name = storage.unique_name(f"{base_name(upfile.name)}.{EXTENSIONS[content_type]}")
    path = storage.upload("media", f"{folder}/{name}", upfile, content_type)
    return Response(
        {"detail": message("image.uploaded", lang), "url": storage.public_url("media", path), "path": path},
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
@parser_classes([JSONParser, FormParser])
@permission_classes([IsEditor])
def embed(request):
    """{kind: video|podcast|drive|audio, url, title?, type?} -> fragment HTML filtre."""
    lang = resolve_language(request)
    fragment = build_embed(
        (request.data.get("kind") or "").strip(),
        (request.data.get("url") or "").strip(),
        title=(request.data.get("title") or "").strip(),
        type=(request.data.get("type") or "audio/mpeg").strip(),
        lang=lang,
    )
    return Response({"html": sanitize_html(fragment)})


@api_view(["POST"])
@permission_classes([IsEditor])
def preview(request):
    return Response({"html": sanitize_html(request.data.get("html") or "")})


@api_view(["GET"])
@permission_classes([IsEditor])
def editor_config(request):
    """Attributs de l'editeur (langue du correcteur orthographique) et limites d'envoi."""
    lang = resolve_language(request)
    return Response({
        "attributes": {"spellcheck": "true", "lang": lang},
        "heading_levels": [1, 2, 3],
        "alignments": ["left", "center", "right", "justify"],
        "image": {
            "max_bytes": settings.EDITOR_IMAGE_MAX_BYTES,
            "max_width": settings.EDITOR_IMAGE_MAX_WIDTH,
            "max_height": settings.EDITOR_IMAGE_MAX_HEIGHT,
        },
        "audio_max_bytes": settings.AUDIO_MAX_BYTES,
        "trusted_iframe_domains": list(settings.EDITOR_TRUSTED_IFRAME_DOMAINS),
    })
