import os
from django.conf import settings
from django.http import JsonResponse
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import permissions


class PingView(APIView):
    """
    GET /api/common/ping -> {"pong": true}
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response({"pong": True})


class InfoView(APIView):
    """
    GET /api/common/info -> infos minimales d'environnement (non sensibles)
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response({
            "debug": bool(getattr(settings, "DEBUG", False)),
            "env": os.getenv("DJANGO_ENV", "local"),
            "languages": list(getattr(settings, "PARISH_LANGUAGES", ())),
            "default_language": getattr(settings, "PARISH_DEFAULT_LANGUAGE", "fr"),
        })


def not_found(request, exception=None):
    """Route inconnue -> 404 JSON (meme enveloppe que les erreurs DRF)."""
    return JsonResponse(
        {"error": {"code": "not_found", "detail": "Page introuvable", "status": 404}},
        status=404,
    )
