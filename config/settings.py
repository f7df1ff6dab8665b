# ========== config/settings.py ==========
"""
Configurações centralizadas da aplicação
"""

from pydantic_settings import BaseSettings
from typing import Any, Dict, List


class Settings(BaseSettings):
    """
    Configurações da aplicação usando Pydantic Settings
    """

    # ===== APLICAÇÃO =====
    APP_NAME: str = "Oráculo Dark Horse"
    APP_VERSION: str = "2.5.0"
    ENVIRONMENT: str = "development"  # development, staging, production
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # ===== REDIS (estado persistido) =====
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = "dh_v25"
    REDIS_MAX_CONNECTIONS: int = 10

    # ===== CORS =====
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "*"  # Permitir todos em desenvolvimento
    ]

    # ===== LIMITES =====
    MAX_HISTORY_SIZE: int = 300
    MAX_M3_HISTORY: int = 50

    # ===== GERAÇÃO =====
    DEFAULT_ENTROPY: float = 0.4
    DEFAULT_VOICE_ENABLED: bool = True

    # ===== RESSONÂNCIA =====
    RESISTENCIA_BASE: float = 100.0
    PESO_GLOBAL: float = 0.4
    PESO_COLUNA: float = 2.8
    PESO_PRIMEIRO_PREMIO: float = 15.0
    PESO_PREMIO_ALTO: float = 7.5
    PESO_HISTORICO: float = 60.0
    PENALIDADE_REPETICAO: float = 35.0
    PENALIDADE_SESSAO: float = 8.0

    # ===== ORÁCULO (chat externo) =====
    CHAT_API_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    CHAT_API_KEY: str = ""
    CHAT_MODEL: str = "gemini-3-flash-preview"
    CHAT_TEMPERATURE: float = 0.8
    CHAT_TOP_P: float = 0.9
    CHAT_TIMEOUT_SECONDS: float = 20.0

    # ===== LOGGING =====
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "api.log"

    @property
    def ressonancia_config(self) -> Dict[str, Any]:
        """Config do ResonanceScorer"""
        return {
            "resistencia_base": self.RESISTENCIA_BASE,
            "peso_global": self.PESO_GLOBAL,
            "peso_coluna": self.PESO_COLUNA,
            "peso_primeiro_premio": self.PESO_PRIMEIRO_PREMIO,
            "peso_premio_alto": self.PESO_PREMIO_ALTO,
            "peso_historico": self.PESO_HISTORICO,
            "penalidade_repeticao": self.PENALIDADE_REPETICAO,
            "penalidade_sessao": self.PENALIDADE_SESSAO,
        }

    class Config:
        env_file = ".env"
