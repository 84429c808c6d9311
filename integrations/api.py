"""
Import trigger endpoints for external integrations.

Mounted at /api/integrations/; each provider gets its own sub-path.
"""

import logging

from django.http import HttpRequest
from ninja import Router, Schema

from integrations.pi8.client import Pi8APIError
from integrations.pi8.services import ImovelImportError, ImovelImportService

logger = logging.getLogger(__name__)

router = Router(tags=["Integrations"])


class ImportResultSchema(Schema):
    success: bool
    fetched: int = 0
    created: int = 0
    updated: int = 0
    failed: int = 0
    detail: str = ""


@router.post("/pi8/import", response={200: ImportResultSchema, 502: ImportResultSchema})
def import_pi8_properties(request: HttpRequest):
    """
    Import every published Pi8 property. Existing imoveis are matched by
    id_integracao and updated; new ones are created. Runs synchronously.
    """
    try:
        service = ImovelImportService()
        result = service.sync()
    except (Pi8APIError, ImovelImportError) as exc:
        logger.error("Pi8 import aborted: %s", exc)
        return 502, {"success": False, "detail": str(exc)}

    return 200, {
        "success": result["failed"] == 0,
        "detail": "Import completed",
        **result,
    }
