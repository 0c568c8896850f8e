from .api_client import CompensacaoApiClient
from .painel import PainelController
from .sisema_service import SisemaWfsService

__all__ = ["CompensacaoApiClient", "PainelController", "SisemaWfsService"]
