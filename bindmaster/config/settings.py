"""
Runtime settings for BindMaster

Values come from the environment (optionally a .env file).
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class Settings(BaseModel):
    """Advisory endpoint, export location and log level"""
    api_key: str = Field(default="", description="API key for the text-generation endpoint")
    base_url: str = Field(default=OPENROUTER_BASE_URL, description="OpenAI-compatible endpoint")
    model: str = Field(default="google/gemini-2.5-flash", description="Model used by the print expert")
    timeout_s: float = Field(default=60.0, description="Advisory request timeout in seconds")
    max_tokens: int = Field(default=2000, description="Response token limit")
    exports_dir: Path = Field(default=Path("./exports"), description="Where exported PDFs are written")
    log_level: str = Field(default="INFO", description="Level for the bindmaster logger")


def load_settings(env: Optional[dict] = None) -> Settings:
    """Build settings from environment variables (or an explicit mapping)."""
    env = os.environ if env is None else env
    return Settings(
        api_key=env.get("BINDMASTER_API_KEY") or env.get("OPENROUTER_API_KEY", ""),
        base_url=env.get("BINDMASTER_BASE_URL", OPENROUTER_BASE_URL),
        model=env.get("BINDMASTER_MODEL", "google/gemini-2.5-flash"),
        timeout_s=float(env.get("BINDMASTER_TIMEOUT_S", 60)),
        max_tokens=int(env.get("BINDMASTER_MAX_TOKENS", 2000)),
        exports_dir=Path(env.get("BINDMASTER_EXPORTS_DIR", "./exports")),
        log_level=env.get("BINDMASTER_LOG_LEVEL", "INFO").upper(),
    )
