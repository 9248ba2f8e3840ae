from django.urls import path
from rest_framework.routers import SimpleRouter

from . import backoffice, views

router = SimpleRouter()
router.register("admin/articles", backoffice.ArticleAdminViewSet, basename="admin-articles")
router.register("admin/pages", backoffice.PageAdminViewSet, basename="admin-pages")
router.register("admin/team", backoffice.TeamMemberAdminViewSet, basename="admin-team")
router.register("admin/schedules", backoffice.ScheduleAdminViewSet, basename="admin-schedules")
router.register("admin/events", backoffice.EventAdminViewSet, basename="admin-events")
router.register("admin/audio", backoffice.AudioFileAdminViewSet, basename="admin-audio")
router.register("admin/social-links", backoffice.SocialLinkAdminViewSet, basename="admin-social-links")
router.register("admin/footer-links", backoffice.FooterLinkAdminViewSet, basename="admin-footer-links")

urlpatterns = [
    # Site public
    path("public/home/", views.home, name="public_home"),
    path("public/articles/", views.article_list, name="public_articles"),
    path("public/articles/<slug:slug>/", views.article_detail, name="public_article_detail"),
    path("public/pages/<slug:slug>/", views.page_detail, name="public_page_detail"),
    path("public/team/", views.team, name="public_team"),
    path("public/schedules/", views.schedules, name="public_schedules"),
    path("public/faq/", views.faq, name="public_faq"),
    path("public/audio/", views.audio, name="public_audio"),
    path("public/footer/", views.footer, name="public_footer"),
    path("public/search/", views.search, name="public_search"),

    # Back-office
    path("admin/slug/", backoffice.slug_preview, name="admin_slug"),
] + router.urls
