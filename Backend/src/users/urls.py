from django.urls import path
from rest_framework.routers import SimpleRouter
from rest_framework_simplejwt.views import TokenRefreshView
from .views import RegisterView, LoginView, LogoutView, MeView, ChangePasswordView, RoleViewSet

router = SimpleRouter()
router.register("roles", RoleViewSet, basename="role")

urlpatterns = [
    # Auth JWT (login / refresh / logout)
    path("token/", LoginView.as_view(), name="token_obtain_pair"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("logout/", LogoutView.as_view(), name="logout"),

    # Inscription
    path("register/", RegisterView.as_view(), name="register"),

    # Session courante
    path("me/", MeView.as_view(), name="me"),

    # Changer le mot de passe
    path("change-password/", ChangePasswordView.as_view(), name="change_password"),
] + router.urls
