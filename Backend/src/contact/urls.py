from django.urls import path
from rest_framework.routers import SimpleRouter

from . import views

router = SimpleRouter()
router.register("admin/messages", views.MessageAdminViewSet, basename="admin-messages")
router.register("admin/subscribers", views.SubscriberAdminViewSet, basename="admin-subscribers")

urlpatterns = [
    path("public/contact/", views.ContactSubmitView.as_view(), name="public_contact"),
    path("admin/stats/", views.stats, name="admin_stats"),
] + router.urls
