from django.contrib import admin
from .models import Indicator, Log1, Log2, Log3, Log4, Log5, Log6


class CurrentLogAdmin(admin.ModelAdmin):
    list_display = ("identifier", "sample", "i", "timestamp", "indicator_id")
    list_filter = ("indicator_id",)
    search_fields = ("identifier",)
    ordering = ("-timestamp",)


for _model in (Log1, Log2, Log3, Log4, Log5, Log6):
    admin.site.register(_model, CurrentLogAdmin)


@admin.register(Indicator)
class IndicatorAdmin(admin.ModelAdmin):
    list_display = ("indicator_id", "motor", "value", "updated_at")
    search_fields = ("motor",)
