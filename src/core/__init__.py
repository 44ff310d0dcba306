"""
Configuração e logging compartilhados pela aplicação
"""
from .config import Settings, get_settings
from .logging import create_logger

__all__ = [
    'Settings',
    'get_settings',
    'create_logger'
]
