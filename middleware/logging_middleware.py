"""
Middleware para logging de requisições
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import time
import logging

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Loga método, caminho, status e duração de cada requisição
    """

    async def dispatch(self, request: Request, call_next):
        inicio = time.perf_counter()
        logger.info(f"➡️  {request.method} {request.url.path}")

        response = await call_next(request)

        duracao_ms = (time.perf_counter() - inicio) * 1000
        nivel = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            nivel,
            f"⬅️  {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Tempo: {duracao_ms:.1f}ms"
        )

        response.headers["X-Process-Time-Ms"] = f"{duracao_ms:.1f}"
        return response
