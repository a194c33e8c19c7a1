from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=False)  # Load .env into process env


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration read from the environment (and `.env`, if present).

    Fields
    ------
    offline_mode : bool
        `OFFLINE_MODE`; when true the OpenAI-backed services never call out.
    openai_api_key : str
        `OPENAI_API_KEY`; empty means "no key", which also disables the services.
    model_name : str
        `MODEL_NAME` used for coach rationales and reviews.
    dictionary_file : str
        `DICTIONARY_FILE`, the word list read by the front ends.
    show_count : bool
        `SHOW_COUNT`; show how many candidate words remain on each turn.
    log_level : str
        `LOG_LEVEL` applied by `configure_logging`.
    """

    offline_mode: bool = True
    openai_api_key: str = ""
    model_name: str = "gpt-4o-mini"
    dictionary_file: str = "data/dictionary.txt"
    show_count: bool = False
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Read a fresh `Settings` from the current environment."""
    return Settings(
        offline_mode=_flag("OFFLINE_MODE", "true"),
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        model_name=os.getenv("MODEL_NAME", "gpt-4o-mini"),
        dictionary_file=os.getenv("DICTIONARY_FILE", "data/dictionary.txt"),
        show_count=_flag("SHOW_COUNT", "false"),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )


def llm_enabled(settings: Settings | None = None) -> bool:
    """True when an API key is configured and OFFLINE_MODE is off."""
    s = settings or get_settings()
    return not s.offline_mode and bool(s.openai_api_key)


def configure_logging(settings: Settings | None = None) -> None:
    """Apply `LOG_LEVEL` to the root logger; front ends call this once at startup."""
    s = settings or get_settings()
    level = getattr(logging, s.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
