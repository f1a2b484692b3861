# --------------------------------------------------------------
# File: log.py
# Description: Loggers del paquete con enmascarado de valores sensibles.
# --------------------------------------------------------------
"""Utilidades de logging que impiden volcar secretos en los registros."""

import logging
from typing import Any, Dict

SENSITIVE_KEYS = frozenset({"secret", "password", "passphrase", "plaintext", "key"})
MASK = "***"


def _mask(values: Dict[str, Any]) -> Dict[str, Any]:
    return {
        name: MASK if name.lower() in SENSITIVE_KEYS else value
        for name, value in values.items()
    }


class SecretRedactionFilter(logging.Filter):
    """Sustituye por `***` los valores sensibles de los argumentos tipo dict."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, dict):
            record.msg = _mask(record.msg)
        if isinstance(record.args, dict):
            record.args = _mask(record.args)
        elif isinstance(record.args, tuple):
            record.args = tuple(
                _mask(arg) if isinstance(arg, dict) else arg for arg in record.args
            )
        return True


def get_logger(name: str) -> logging.Logger:
    """Devuelve el logger del módulo con el filtro de secretos instalado."""

    logger = logging.getLogger(name)
    if not any(isinstance(f, SecretRedactionFilter) for f in logger.filters):
        logger.addFilter(SecretRedactionFilter())
    return logger
