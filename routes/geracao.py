"""
routes/geracao.py

Rota do ciclo de geração (Colapso Elite)
"""

from fastapi import APIRouter, HTTPException, Request
from typing import Dict
from datetime import datetime
import logging

from core.painel import gerar, MatrizBloqueadaError
from helpers.estado import carregar_estado, aplicar_operacao
from patterns.ressonancia import ResonanceScorer

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("")
async def post_geracao(request: Request) -> Dict:
    """
    Gera a matriz principal, a tríade de milhares e as predições avançadas

    Usa M1, M2, M3 + histórico + acertos e a entropia das configurações.
    A matriz fica travada até um novo resultado ser colado no M3.

    Returns:
        result, candidates, advanced_predictions, analysis, errors (diagnóstico)
    """
    estado = await carregar_estado(request)
    settings = request.app.state.settings

    try:
        op = gerar(estado, scorer=ResonanceScorer(config=settings.ressonancia_config))
    except MatrizBloqueadaError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return await aplicar_operacao(request, estado, op)


@router.get("/ultima")
async def get_ultima(request: Request) -> Dict:
    """
    Última geração persistida
    """
    estado = await carregar_estado(request)

    return {
        "timestamp": datetime.now().isoformat(),
        "locked": estado.locked,
        "result": estado.last_res,
        "candidates": estado.last_cand,
        "advanced_predictions": estado.last_adv,
        "analysis": estado.last_ana,
    }
