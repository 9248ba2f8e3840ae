from .base import *  # noqa

# --- .env du dossier Backend/ (ecrase les variables de la session) ---
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parents[3] / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH, override=True)
    logging.getLogger(__name__).info("[settings] .env chargé depuis %s", ENV_PATH)

# --- Dev local ---
DEBUG = True
ALLOWED_HOSTS = ["127.0.0.1", "localhost", "host.docker.internal"]

# Si tu utilises Vite en dev
CSRF_TRUSTED_ORIGINS = [
    "http://127.0.0.1:5173",
    "http://localhost:5173",
]

# Ne pas ré-ajouter corsheaders ici (il est déjà dans base.py)

# CORS en dev
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_CREDENTIALS = True

# E-mails affichés dans la console en dev
EMAIL_BACKEND = os.getenv("DJANGO_EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend")

# Pas de worker Celery obligatoire en dev
CELERY_TASK_ALWAYS_EAGER = env_bool("CELERY_TASK_ALWAYS_EAGER", True)

# Expose les valeurs lues (utilisées par le code applicatif)
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/")
PARISH_CONTACT_EMAIL = os.getenv("PARISH_CONTACT_EMAIL", PARISH_CONTACT_EMAIL)
