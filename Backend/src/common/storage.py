"""
Facade de stockage objet au-dessus de `default_storage`.

Trois "buckets" (sous-dossiers de MEDIA_ROOT): media, audio, attachments.
Les chemins manipules par le reste du code sont relatifs au bucket
(ex: "podcasts/1700000000000-homelie.mp3").
"""
import logging
import re
import time
from typing import Iterable, Optional
from urllib.parse import urljoin

from django.conf import settings
from django.core.files.base import File
from django.core.files.storage import default_storage

logger = logging.getLogger(__name__)

BUCKETS = ("media", "audio", "attachments")

_UNSAFE = re.compile(r"[^A-Za-z0-9.-]")


def _check_bucket(bucket: str) -> None:
    if bucket not in BUCKETS:
        raise ValueError(f"Bucket inconnu: {bucket}")


def unique_name(filename: str) -> str:
    """"1700000000000-nom_nettoye.ext" (horodatage en millisecondes)."""
    cleaned = _UNSAFE.sub("_", filename or "fichier")
    return f"{int(time.time() * 1000)}-{cleaned}"


def upload(bucket: str, path: str, fileobj, content_type: Optional[str] = None) -> str:
    """Enregistre le fichier et retourne le chemin reellement stocke (relatif au bucket)."""
    _check_bucket(bucket)
    if not isinstance(fileobj, File):
        fileobj = File(fileobj, name=path)
    stored = default_storage.save(f"{bucket}/{path}", fileobj)
    logger.info("Fichier stocke: %s (%s)", stored, content_type or "type inconnu")
    return stored[len(bucket) + 1:]


def public_url(bucket: str, path: str) -> str:
    _check_bucket(bucket)
    relative = default_storage.url(f"{bucket}/{path}")
    return urljoin(settings.PUBLIC_BASE_URL + "/", relative.lstrip("/"))


def path_from_public_url(bucket: str, url: Optional[str]) -> Optional[str]:
    """
    Inverse de public_url: None si l'URL ne pointe pas dans ce bucket.
    Les chemins qui remontent (..) ou absolus sont refuses.
    """
    if not url:
        return None
    marker = f"{settings.MEDIA_URL.rstrip('/')}/{bucket}/"
    idx = url.find(marker)
    if idx == -1:
        return None
    path = url[idx + len(marker):].split("?", 1)[0].split("#", 1)[0]
    if not path or path.startswith("/") or "\\" in path:
        return None
    if ".." in path.split("/"):
        logger.warning("Chemin hors du bucket %s ignore: %s", bucket, path)
        return None
    return path


def remove(bucket: str, paths: Iterable[str]) -> int:
    """Supprime les objets existants; retourne le nombre effectivement supprime."""
    _check_bucket(bucket)
    removed = 0
    for path in paths:
        if not path:
            continue
        name = f"{bucket}/{path}"
        if default_storage.exists(name):
            default_storage.delete(name)
            removed += 1
            logger.info("Fichier supprime: %s", name)
    return removed
