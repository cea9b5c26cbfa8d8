from django.db import models

from .exceptions import InvalidInput
from .models import Log1, Log2, Log3, Log4, Log5, Log6


class Partition(models.TextChoices):
    LOG1 = "log1", "Log 1"
    LOG2 = "log2", "Log 2"
    LOG3 = "log3", "Log 3"
    LOG4 = "log4", "Log 4"
    LOG5 = "log5", "Log 5"
    LOG6 = "log6", "Log 6"


_MODELS = {
    Partition.LOG1: Log1,
    Partition.LOG2: Log2,
    Partition.LOG3: Log3,
    Partition.LOG4: Log4,
    Partition.LOG5: Log5,
    Partition.LOG6: Log6,
}


def resolve_partition(name) -> Partition:
    try:
        return Partition(name)
    except ValueError:
        raise InvalidInput(f"Unknown log table: {name!r}")


def model_for(partition: Partition):
    return _MODELS[partition]
