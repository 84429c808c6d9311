from django.contrib import admin

from .models import APISyncLog


@admin.register(APISyncLog)
class APISyncLogAdmin(admin.ModelAdmin):
    list_display = (
        "source", "endpoint", "sync_type", "status", "records_fetched",
        "records_created", "records_updated", "records_failed", "started_at",
    )
    list_filter = ("source", "status")
    search_fields = ("endpoint",)
    readonly_fields = ("started_at", "completed_at")
