# backend/shopcart/core/logging_config.py
"""
Configuración del logging de la aplicación a partir de Settings.
"""
import logging
from pathlib import Path
from typing import Optional

from shopcart.core.config import Settings, settings as default_settings

LOGGER_NAME = "shopcart"


def resolve_log_path(settings: Settings) -> Optional[Path]:
    """Ruta del fichero de log; las relativas cuelgan de BASE_DIR."""
    if not settings.LOG_FILE_PATH:
        return None
    log_path = Path(settings.LOG_FILE_PATH)
    if not log_path.is_absolute():
        log_path = settings.BASE_DIR / log_path
    return log_path


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configura el logger raíz del paquete con el nivel y formato de la configuración.

    Añade un handler de consola y, si LOG_FILE_PATH está definido, uno de fichero.
    Llamarla varias veces actualiza el nivel pero no duplica handlers.
    """
    settings = settings or default_settings
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL.upper())

    if logger.handlers:
        return logger

    # Evita registros duplicados si la aplicación anfitriona configura el root
    logger.propagate = False
    formatter = logging.Formatter(settings.LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_path = resolve_log_path(settings)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging inicializado para %s", settings.PROJECT_NAME)
    return logger
