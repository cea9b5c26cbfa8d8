from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    # 주소 없이 `runserver` 하면 settings.PORT 사용
    default_port = str(getattr(settings, "PORT", 3000))
