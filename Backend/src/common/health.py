from django.db import connection
from django.http import JsonResponse


def health(request):
    """
    Endpoint de sante tres simple.
    GET /api/common/health -> {"status":"ok","service":"paroisse","database":"ok"}
    """
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")
    return JsonResponse({"status": "ok", "service": "paroisse", "database": "ok"})
