import logging
from typing import Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class UserFacingAPIException(APIException):
    """
    Exception controlee pour retourner un message localise a l'utilisateur
    (equivalent du toast "Erreur" cote client).
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Une erreur est survenue."
    default_code = "error"


class UploadRejected(UserFacingAPIException):
    """Fichier refuse avant tout envoi vers le stockage (type ou taille)."""
    default_code = "upload_rejected"


class EmbedNotRecognized(UserFacingAPIException):
    default_code = "embed_not_recognized"


def _flatten(data):
    """
    {"detail": "msg"} ou {"non_field_errors": ["msg"]} -> "msg".
    Les erreurs par champ restent un dict.
    """
    if isinstance(data, dict) and len(data) == 1:
        key, value = next(iter(data.items()))
        if key in ("detail", "non_field_errors"):
            data = value
    if isinstance(data, list) and len(data) == 1:
        data = data[0]
    return data


def custom_exception_handler(exc, context) -> Optional[Response]:
    """
    Enveloppe les erreurs DRF dans un format stable:
    {"error": {"code": ..., "detail": ..., "status": ...}}
    """
    response = exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, Http404):
            code = "not_found"
        else:
            code = getattr(exc, "default_code", "error")
        response.data = {
            "error": {
                "code": code,
                "detail": _flatten(response.data),
                "status": response.status_code,
            }
        }
        return response

    # Erreur non geree -> 500 (journalisee, jamais rejouee)
    view = context.get("view")
    logger.exception("Erreur non geree dans %s", view.__class__.__name__ if view else "?", exc_info=exc)
    return Response(
        {"error": {"code": "server_error", "detail": "Erreur interne", "status": 500}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
