from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),

    # APIs
    path("api/common/", include("common.urls")),
    path("api/auth/", include("users.urls")),

    # Site public (/api/public/...) et back-office (/api/admin/...)
    path("api/", include("content.urls")),
    path("api/", include("contact.urls")),
    path("api/", include("editor.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

# Route inconnue -> 404 JSON
handler404 = "common.views.not_found"
