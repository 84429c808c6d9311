from django.conf import settings
from django.contrib import admin
from django.db import connection
from django.urls import path
from ninja import NinjaAPI
from ninja.security import APIKeyHeader

from imoveis.api import router as imoveis_router
from integrations.api import router as integrations_router


class ImoveisAPIKey(APIKeyHeader):
    param_name = "X-API-Key"

    def authenticate(self, request, key):
        expected = settings.IMOVEIS_API_KEY
        if not expected:
            return "dev"  # No key configured, allow all (local dev)
        if key == expected:
            return key
        return None


api = NinjaAPI(
    title="Imoveis API",
    version="0.1.0",
    description="Property listings imported from the Pi8 platform.",
    auth=[ImoveisAPIKey()],
)


@api.get("/health", auth=None, tags=["System"])
def health_check(request):
    try:
        connection.ensure_connection()
        return {"status": "ok", "db": "connected"}
    except Exception as e:
        return {"status": "error", "db": str(e)}


api.add_router("/imoveis/", imoveis_router)
api.add_router("/integrations/", integrations_router)

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", api.urls),
]
