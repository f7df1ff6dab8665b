"""
Middleware para tratamento de erros
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from datetime import datetime
import logging

from core.painel import MatrizBloqueadaError
from core.store import EstadoInvalidoError

logger = logging.getLogger(__name__)


def _erro(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "timestamp": datetime.now().isoformat(),
        }
    )


async def error_handler_middleware(request: Request, call_next):
    """
    Middleware para capturar erros que escaparam das rotas
    """
    try:
        return await call_next(request)

    except MatrizBloqueadaError as e:
        logger.warning(f"Geração bloqueada: {e}")
        return _erro(409, "Conflict", str(e))

    except EstadoInvalidoError as e:
        logger.error(f"Estado inválido: {e}")
        return _erro(500, "Invalid State", str(e))

    except ValueError as e:
        logger.error(f"ValueError: {e}")
        return _erro(400, "Bad Request", str(e))

    except Exception as e:
        logger.error(f"Erro não tratado: {e}", exc_info=True)
        return _erro(500, "Internal Server Error", "Erro interno do servidor")
