from .servicos import get_api_client, get_settings_dep, get_sisema_service

__all__ = ["get_api_client", "get_settings_dep", "get_sisema_service"]
