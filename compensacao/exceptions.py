"""Erros de domínio convertidos em respostas JSON pelos handlers de ``create_app``."""


class StoreError(Exception):
    """Falha em uma operação do banco de dados; a mensagem é a original do driver."""


class RegistroNaoEncontrado(Exception):
    """Atualização ou remoção por id que não afetou nenhuma linha."""


class UpstreamError(Exception):
    """Falha ao consultar o serviço geográfico externo (WFS)."""
