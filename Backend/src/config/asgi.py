import os

from dotenv import load_dotenv
from django.core.asgi import get_asgi_application

# .env puis settings de production (surchargeable par DJANGO_SETTINGS_MODULE)
load_dotenv()
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.prod")

application = get_asgi_application()
