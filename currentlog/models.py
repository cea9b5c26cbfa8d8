from django.db import models


class CurrentLog(models.Model):
    sample       = models.IntegerField()
    i            = models.FloatField()
    timestamp    = models.DateTimeField(db_index=True)
    identifier   = models.CharField(max_length=64)  # 배치 id (uuid4)
    indicator_id = models.IntegerField(null=True, blank=True)
    created_at   = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        indexes = [
            models.Index(fields=["identifier", "timestamp"], name="%(class)s_ident_ts_idx"),
            models.Index(fields=["indicator_id", "timestamp"], name="%(class)s_ind_ts_idx"),
        ]

    def __str__(self):
        return f"{self.identifier}#{self.sample} I={self.i} @ {self.timestamp.isoformat()}"


# 같은 스키마의 병렬 테이블 6개, Partition 값과 db_table 이름이 같음
class Log1(CurrentLog):
    class Meta(CurrentLog.Meta):
        db_table = "log1"


class Log2(CurrentLog):
    class Meta(CurrentLog.Meta):
        db_table = "log2"


class Log3(CurrentLog):
    class Meta(CurrentLog.Meta):
        db_table = "log3"


class Log4(CurrentLog):
    class Meta(CurrentLog.Meta):
        db_table = "log4"


class Log5(CurrentLog):
    class Meta(CurrentLog.Meta):
        db_table = "log5"


class Log6(CurrentLog):
    class Meta(CurrentLog.Meta):
        db_table = "log6"


class Indicator(models.Model):
    indicator_id = models.IntegerField(unique=True, db_index=True)
    value        = models.FloatField()
    motor        = models.CharField(max_length=64, blank=True)
    updated_at   = models.DateTimeField()

    def __str__(self):
        label = f" ({self.motor})" if self.motor else ""
        return f"indicator {self.indicator_id}{label} = {self.value}"
