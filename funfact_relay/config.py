import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).resolve().parent

# Load .env next to this file (for API_KEY, PORT)
load_dotenv(dotenv_path=PACKAGE_DIR / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PUBLIC_DIR = Path(os.getenv("PUBLIC_DIR", str(PACKAGE_DIR / "public")))

# Deployed frontends allowed to call the API from a browser
ALLOWED_ORIGINS = [
    "https://funfactgenerator123.netlify.app",
    "https://funfactgenerator456.netlify.app",
    "https://cardgenerator123.netlify.app",
]
ALLOWED_METHODS = ["GET", "POST"]

GEMINI_ENDPOINT = (
    "https://generativelanguage.googleapis.com/v1/models/"
    "gemini-2.0-flash:generateContent"
)
PROMPT_TEMPLATE = "Give me 1 short fun fact about {theme}. Do not include introductions or numbering."
TEMPERATURE = 1.5       # controls creativity
MAX_OUTPUT_TOKENS = 100
TOP_P = 1
TOP_K = 1

DEFAULT_THEME = "random"
MIN_FACT_LENGTH = 5
FALLBACK_FACT = "No fun fact found for {theme}. Please try again."
ERROR_MESSAGE = "Failed to fetch fun fact"


def get_api_key() -> Optional[str]:
    """Read the Gemini key per request so it can be set after startup."""
    return os.getenv("API_KEY") or None
