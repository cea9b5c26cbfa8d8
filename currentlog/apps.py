import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class CurrentLogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "currentlog"
    verbose_name = "Current log"
    store = None

    def ready(self):
        from .store import LogStore

        self.store = LogStore(using=getattr(settings, "SENSORLOG_DB_ALIAS", "default"))
        logger.info(
            "[startup] store db=%s tz=%s threshold=%s gate=%s",
            self.store.using,
            getattr(settings, "SENSORLOG_TIME_ZONE", "Asia/Jakarta"),
            getattr(settings, "SENSORLOG_THRESHOLD", 400),
            getattr(settings, "SENSORLOG_THRESHOLD_GATE", True),
        )
