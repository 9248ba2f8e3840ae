import tempfile

from .base import *

# Tests
DEBUG = True

# DB sqlite en mémoire par défaut pour rapidité
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Auth plus légère en test
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Email capturé en mémoire
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Fichiers uploadés dans un dossier jetable
MEDIA_ROOT = tempfile.mkdtemp(prefix="paroisse-media-")
PUBLIC_BASE_URL = "http://localhost:8000"

# Celery: exécution synchrone, sans broker
CELERY_TASK_ALWAYS_EAGER = True
CELERY_BROKER_URL = "memory://"

# DRF: mêmes permissions qu'en prod, throttling relâché
REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_RATES": {"contact": "1000/minute"},
}
