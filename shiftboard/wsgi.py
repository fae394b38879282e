"""WSGI entry point for the shiftboard project."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shiftboard.settings")

application = get_wsgi_application()
