# config.py
# All configuration and environment variables live here.
# No hardcoded values anywhere in ticket_store.py or api_server.py

import os

# ── Simulated inference ───────────────────────────────────────────────────────
INFERENCE_DELAY_SECONDS: float = float(os.getenv("INFERENCE_DELAY_SECONDS", "1.5"))
RESPONSE_DELAY_SECONDS: float = float(os.getenv("RESPONSE_DELAY_SECONDS", "2.0"))

# ── Classification ────────────────────────────────────────────────────────────
FALLBACK_CONFIDENCE: float = 0.3
BASE_CONFIDENCE: float = 0.8
CONFIDENCE_PER_KEYWORD: float = 0.05
MAX_CONFIDENCE: float = 0.98

# ── Ticket views ──────────────────────────────────────────────────────────────
TICKET_ID_PREFIX: str = "TKT"
CATEGORY_FILTER_ALL: str = "All"
RECENT_ACTIVITY_LIMIT: int = int(os.getenv("RECENT_ACTIVITY_LIMIT", "5"))

# ── API ───────────────────────────────────────────────────────────────────────
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
