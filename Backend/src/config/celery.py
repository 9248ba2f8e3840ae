import os

from celery import Celery
from dotenv import load_dotenv

load_dotenv()

# Definir le settings module Django par defaut
os.environ.setdefault(
    "DJANGO_SETTINGS_MODULE",
    os.getenv("DJANGO_SETTINGS_MODULE", "config.settings.local"),
)

app = Celery("paroisse")

# Charger la config depuis Django (prefixe CELERY_ dans settings)
app.config_from_object("django.conf:settings", namespace="CELERY")

# Autodiscovery des tasks.py dans les apps installees (contact.tasks)
app.autodiscover_tasks()
