# ========== routes/health.py ==========
"""
Rota de Health Check
"""

from fastapi import APIRouter, Request
from datetime import datetime

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """
    Verifica status da aplicação e do Redis
    """
    try:
        store = request.app.state.store
        await store.client.ping()

        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "store": "connected",
            "version": request.app.version,
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "timestamp": datetime.now().isoformat(),
            "store": "disconnected",
            "error": str(e)
        }


@router.get("/ping")
async def ping():
    """
    Ping simples
    """
    return {"message": "pong", "timestamp": datetime.now().isoformat()}
