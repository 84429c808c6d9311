from .client import Pi8APIError, Pi8Client
from .services import (
    AnexoSynchronizer,
    ImovelImportError,
    ImovelImportService,
    ImovelReconciler,
)

__all__ = [
    "Pi8APIError",
    "Pi8Client",
    "AnexoSynchronizer",
    "ImovelImportError",
    "ImovelImportService",
    "ImovelReconciler",
]
