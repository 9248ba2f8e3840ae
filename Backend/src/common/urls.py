from django.urls import path

from .health import health
from .views import InfoView, PingView

# Supervision (sonde du reverse proxy, page "a propos" du back-office)
urlpatterns = [
    path("health/", health, name="health"),
    path("ping/", PingView.as_view(), name="ping"),
    path("info/", InfoView.as_view(), name="info"),
]
