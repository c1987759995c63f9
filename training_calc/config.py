"""
Configuration via variables d'environnement (un fichier .env local est chargé
s'il existe).

- TRAINING_LOCALE : langue des libellés du rapport (ru / en / fr), défaut ru
- LOG_LEVEL       : niveau de log (DEBUG, INFO, WARNING...), défaut WARNING
"""
from dotenv import load_dotenv
load_dotenv()

import os

DEFAULT_LOCALE = "ru"
DEFAULT_LOG_LEVEL = "WARNING"


def get_locale() -> str:
    return os.getenv("TRAINING_LOCALE", DEFAULT_LOCALE).strip().lower() or DEFAULT_LOCALE


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
