"""
helpers/estado.py

Ponte entre as rotas e o EstadoStore guardado em app.state
"""

from datetime import datetime
from typing import Any, Dict

from fastapi import HTTPException, Request

from core.painel import Operacao
from core.store import EstadoSnapshot, EstadoStore, EstadoInvalidoError


def get_store(request: Request) -> EstadoStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Store não inicializado")
    return store


async def carregar_estado(request: Request) -> EstadoSnapshot:
    """
    Lê o snapshot atual

    Raises:
        HTTPException: 500 se o valor persistido estiver corrompido
    """
    try:
        return await get_store(request).carregar()
    except EstadoInvalidoError as e:
        raise HTTPException(status_code=500, detail=str(e))


async def aplicar_operacao(request: Request, estado: EstadoSnapshot, op: Operacao) -> Dict[str, Any]:
    """Grava as mutações da operação e monta a resposta padrão (já com o estado novo)"""
    novo = estado.com(op.mutacoes)
    await get_store(request).aplicar(op.mutacoes)
    return {
        "timestamp": datetime.now().isoformat(),
        "mensagem": op.mensagem,
        "voice_enabled": novo.voice_enabled,
        **op.dados,
    }
