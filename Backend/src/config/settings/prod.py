from .base import *  # noqa

# Production
DEBUG = False

if SECRET_KEY == "dev_only_change_me":
    raise RuntimeError("DJANGO_SECRET_KEY doit être défini en production")

# Exemple: export DJANGO_ALLOWED_HOSTS="api.paroisse-stpaul.fr"
ALLOWED_HOSTS = [h for h in os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",") if h]

# Front public + back-office (ex: https://paroisse-stpaul.fr)
CORS_ALLOWED_ORIGINS = [u for u in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",") if u]
CSRF_TRUSTED_ORIGINS = CORS_ALLOWED_ORIGINS

CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
SECURE_SSL_REDIRECT = env_bool("DJANGO_SSL_REDIRECT", True)
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True

# Back-office: JWT uniquement (pas de session navigateur)
REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework_simplejwt.authentication.JWTAuthentication",
    ),
}

# SMTP du secretariat
EMAIL_HOST_USER = os.getenv("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.getenv("EMAIL_HOST_PASSWORD", "")
EMAIL_USE_TLS = env_bool("EMAIL_USE_TLS", True)

LOGGING = {
    **LOGGING,
    "formatters": {"simple": {"format": "[%(asctime)s] [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"}},
    "loggers": {"django.request": {"level": "WARNING"}},
}
