#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from pydantic_settings import BaseSettings


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Application ==========
    app_name: str = "Manuscript Export"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # ========== Export ==========
    export_language: str = "fr"  # Labels: Partie, Chapitre, Table des matières...
    default_pdf_template: str = "standard"  # standard | book
    default_docx_template: str = "standard"  # standard | book

    # PDF streaming
    pdf_stream_chunk_size: int = 16 * 1024  # Bytes per streamed chunk
    pdf_stream_queue_size: int = 8  # Chunks buffered before the producer blocks

    # Extra directories searched for TTF fonts (comma-separated in env)
    font_dirs: str = ""
    fonts_dir: Path = BASE_DIR / "assets" / "fonts"

    # ========== HTTP ==========
    # CORS origins (comma-separated in env, parsed to list)
    cors_origins: str = ""  # Empty = use default dev origins

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def get_cors_origins(self) -> list:
        """Get CORS origins as a list. Falls back to dev defaults if empty."""
        if self.cors_origins:
            return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        # Dev defaults
        return [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]

    def get_font_dirs(self) -> list:
        """Extra font search paths, project fonts directory first."""
        dirs = [str(self.fonts_dir)]
        if self.font_dirs:
            dirs.extend(d.strip() for d in self.font_dirs.split(",") if d.strip())
        return dirs


# Global settings instance
settings = Settings()
