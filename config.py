"""
config.py — Konfiguracja kalkulatora przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks EXPRCALC_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "WARNING"

    # Pipeline
    optimize: bool = True

    # REPL
    show_ast: bool = True
    show_optimized_ast: bool = True
    prompt: str = "> "

    model_config = SettingsConfigDict(env_prefix="EXPRCALC_", env_file=".env", extra="ignore")
