"""
Gerenciador de conexão com o Redis (estado persistido do painel)
"""

from redis.asyncio import Redis
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class StoreManager:
    """
    Gerencia a conexão com o Redis
    Chaves: {REDIS_KEY_PREFIX}_history, _hits, _rect, _settings, ...
    """

    def __init__(self, settings):
        self.settings = settings
        self.client: Optional[Redis] = None

    async def connect(self):
        """Conectar ao Redis"""
        try:
            self.client = Redis.from_url(
                self.settings.REDIS_URL,
                max_connections=self.settings.REDIS_MAX_CONNECTIONS,
                decode_responses=True,
            )
            logger.info(f"✅ Conectado ao Redis: {self.settings.REDIS_URL}")
        except Exception as e:
            logger.error(f"❌ Erro ao conectar Redis: {e}")
            raise

    async def disconnect(self):
        """Desconectar do Redis"""
        if self.client is not None:
            await self.client.aclose()
            logger.info("Redis desconectado")

    async def ping(self) -> bool:
        """Verificar conexão"""
        try:
            if self.client is None:
                return False
            return bool(await self.client.ping())
        except Exception as e:
            logger.error(f"Erro no ping Redis: {e}")
            return False

    def get_client(self) -> Redis:
        """Retorna o cliente Redis"""
        if self.client is None:
            raise RuntimeError("Redis não está conectado")
        return self.client
