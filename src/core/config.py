"""
Configuração da aplicação lida do ambiente (.env)
"""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Níveis aceitos tanto pelo logging quanto pelo uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_port(value: str, default: int) -> int:
    try:
        port = int(value)
    except ValueError:
        logger.warning("APP_PORT inválido %r; usando %d", value, default)
        return default
    if not 0 < port < 65536:
        logger.warning("APP_PORT fora do intervalo %r; usando %d", value, default)
        return default
    return port


def _as_log_level(value: str, default: str) -> str:
    level = value.strip().upper()
    level = LOG_LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        logger.warning("LOG_LEVEL inválido %r; usando %s", value, default)
        return default
    return level


@dataclass(frozen=True)
class Settings:
    """Parâmetros de execução do servidor de demonstrações"""
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Monta as configurações a partir das variáveis de ambiente"""
    defaults = Settings()
    return Settings(
        host=os.getenv("APP_HOST", defaults.host),
        port=_as_port(os.getenv("APP_PORT", str(defaults.port)), defaults.port),
        reload=_as_bool(os.getenv("APP_RELOAD", "false")),
        log_level=_as_log_level(os.getenv("LOG_LEVEL", defaults.log_level), defaults.log_level)
    )
