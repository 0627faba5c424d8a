"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks DIGIT_CALC_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Wejście (plik z wyrażeniami, jedno na linię)
    input_file: str = "equations.txt"
    skip_blank_lines: bool = True

    # Parser (każdy poziom nawiasów to kilka ramek stosu)
    max_nesting_depth: int = 100

    # Batch
    max_workers: int = 8
    max_batch_size: int = 1000

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "DigitCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="DIGIT_CALC_", env_file=".env", extra="ignore")
