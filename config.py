import os
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --------- OpenAI ----------
# The key is checked when a request is made, not here, so the app still boots without it.
OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4.1-mini")
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.2"))
_timeout = os.getenv("OPENAI_TIMEOUT")
OPENAI_TIMEOUT: Optional[float] = float(_timeout) if _timeout else None

# --------- Analysis ----------
PROMPT_VARIANT = os.getenv("PROMPT_VARIANT", "itemized").strip().lower()

# --------- Server ----------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()


def cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]
