"""Configuration — variables d'environnement + valeurs par défaut."""
import os
from pathlib import Path

DATA_DIR = Path(os.getenv("STOREFRONT_DATA_DIR", str(Path.cwd() / "data")))

DB_URL = os.getenv("STOREFRONT_DB_URL", f"sqlite:///{DATA_DIR / 'storefront.db'}")

DEFAULT_LANGUAGE = os.getenv("STOREFRONT_DEFAULT_LANG", "en")

# Tentatives supplémentaires après un échec de sauvegarde (0 = pas de retry)
SAVE_RETRIES     = int(os.getenv("STOREFRONT_SAVE_RETRIES", "2"))
SAVE_RETRY_DELAY = float(os.getenv("STOREFRONT_SAVE_RETRY_DELAY", "1.0"))

DEFAULT_CURRENCY = os.getenv("STOREFRONT_DEFAULT_CURRENCY", "USD")
