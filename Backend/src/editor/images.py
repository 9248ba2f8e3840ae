import io
import logging
import os
from typing import Iterable, Optional, Tuple

from django.conf import settings
from django.core.files.base import ContentFile
from PIL import Image, UnidentifiedImageError

from common.exceptions import UploadRejected
from common.i18n import message

logger = logging.getLogger(__name__)

FORM_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")


def check_image(upfile, lang: str = "fr", allowed_types: Optional[Iterable[str]] = None) -> None:
    """Refuse le fichier avant tout envoi: type image et taille <= EDITOR_IMAGE_MAX_BYTES."""
    content_type = (getattr(upfile, "content_type", "") or "").lower()
    if allowed_types is not None:
        if content_type not in allowed_types:
            raise UploadRejected(message("image.bad_type", lang))
    elif not content_type.startswith("image/"):
        raise UploadRejected(message("image.not_image", lang))
    if upfile.size > settings.EDITOR_IMAGE_MAX_BYTES:
        raise UploadRejected(message("image.too_large", lang))


def compress_image(upfile, lang: str = "fr") -> Tuple[ContentFile, str, str]:
    """
    Redimensionne dans 800x600 (ratio conserve) et reencode en WebP qualite 80.
    Les GIF passent tels quels (animation conservee).
    Retourne (contenu, extension, content_type).
    """
    content_type = (getattr(upfile, "content_type", "") or "").lower()
    if "gif" in content_type:
        return ContentFile(upfile.read()), "gif", "image/gif"

    try:
        with Image.open(upfile) as img:
            img.load()
            if img.mode not in ("RGB", "RGBA"):
                img = img.convert("RGBA" if "transparency" in img.info else "RGB")
            img.thumbnail(
                (settings.EDITOR_IMAGE_MAX_WIDTH, settings.EDITOR_IMAGE_MAX_HEIGHT),
                Image.Resampling.LANCZOS,
            )
            buffer = io.BytesIO()
            img.save(buffer, format="WEBP", quality=settings.EDITOR_IMAGE_QUALITY)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError):
        logger.warning("Image illisible: %s", getattr(upfile, "name", "?"))
        raise UploadRejected(message("image.unreadable", lang))

    logger.info("Image compressee: %s -> %s octets", upfile.size, buffer.tell())
    return ContentFile(buffer.getvalue()), "webp", "image/webp"


def base_name(filename: str) -> str:
    return os.path.splitext(os.path.basename(filename or ""))[0] or "image"
