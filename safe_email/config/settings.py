"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Privacy ---
PII_REDACTION_ENABLED: bool = os.getenv("PII_REDACTION_ENABLED", "true").lower() == "true"
MAX_BODY_LOG_CHARS: int = int(os.getenv("MAX_BODY_LOG_CHARS", "500"))

# --- Rendering ---
VIEW_CACHE_SIZE: int = int(os.getenv("VIEW_CACHE_SIZE", "128"))
