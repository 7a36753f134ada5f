"""``runserver`` listening on ``settings.PORT`` (env ``PORT``, default 3001)."""

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    default_port = str(settings.PORT)
