import os
from dotenv import load_dotenv

# Load .env from the backend directory
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "..", ".env"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated; "*" allows everything (local dev)
CORS_ORIGINS: list[str] = [
    o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
]

# LLM provider selection
DEFAULT_LLM_PROVIDER: str = os.getenv("DEFAULT_LLM_PROVIDER", "openai").strip().lower()
DEFAULT_LLM_MODEL: str = os.getenv("DEFAULT_LLM_MODEL", "").strip()
DEFAULT_LLM_TEMPERATURE: float = float(os.getenv("DEFAULT_LLM_TEMPERATURE", "0.2"))
LLM_TIMEOUT_SECONDS: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "").strip()
OPENAI_DEFAULT_MODEL: str = "gpt-4o"

OPENROUTER_API_KEY: str = os.getenv("OPENROUTER_API_KEY", "").strip()
OPENROUTER_API_URL: str = os.getenv("OPENROUTER_API_URL", "https://openrouter.ai/api/v1").strip().rstrip("/")
OPENROUTER_DEFAULT_MODEL: str = os.getenv("OPENROUTER_MODEL", "openai/gpt-4o-mini").strip()

# Number of passages the tutor splices into its prompt
RAG_TOP_K: int = int(os.getenv("RAG_TOP_K", "4"))
