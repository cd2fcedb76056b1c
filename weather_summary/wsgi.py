"""WSGI entry point for the weather summary service."""
from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weather_summary.settings")

application = get_wsgi_application()
