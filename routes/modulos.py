"""
routes/modulos.py

Vetores de entrada: CORE-A (M1), CORE-B (M2) e ONDA-REAL (M3)
M1 e M2 são somente leitura; só o M3 recebe dados.
"""

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
from typing import Dict, List, Optional

from core.painel import (
    colar_m3,
    editar_m3,
    desfazer_m3,
    refazer_m3,
    limpar_m3,
)
from helpers.estado import carregar_estado, aplicar_operacao
from patterns.entrada import parse_paste_text

router = APIRouter()


class VetorIn(BaseModel):
    valores: List[str]


class ColarIn(BaseModel):
    texto: Optional[str] = None
    valores: Optional[List[str]] = None


@router.get("")
async def get_modulos(request: Request) -> Dict:
    """Retorna os três vetores e o estado da navegação do M3"""
    estado = await carregar_estado(request)
    return {
        "m1": estado.m1,
        "m2": estado.m2,
        "m3": estado.m3,
        "m3_idx": estado.m3_idx,
        "m3_total": len(estado.m3_history),
        "locked": estado.locked,
    }


@router.put("/m3")
async def put_m3(request: Request, body: VetorIn) -> Dict:
    """Edição manual do M3 (libera a matriz)"""
    estado = await carregar_estado(request)
    return await aplicar_operacao(request, estado, editar_m3(estado, body.valores))


@router.post("/m3/colar")
async def post_colar(request: Request, body: ColarIn) -> Dict:
    """
    Cola um novo resultado real no M3

    Aceita o texto bruto (uma linha por prêmio) ou o vetor já separado.
    Dispara a auto-correção contra a última matriz e desloca os módulos.
    """
    estado = await carregar_estado(request)
    settings = request.app.state.settings

    if body.texto is not None:
        if not body.texto.strip():
            raise HTTPException(status_code=400, detail="Área de transferência vazia")
        valores = parse_paste_text(body.texto, estado.m3)
    elif body.valores is not None:
        valores = body.valores
    else:
        raise HTTPException(status_code=400, detail="Informe 'texto' ou 'valores'")

    try:
        op = colar_m3(
            estado,
            valores,
            max_history=settings.MAX_HISTORY_SIZE,
            max_m3_history=settings.MAX_M3_HISTORY,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return await aplicar_operacao(request, estado, op)


@router.post("/m3/desfazer")
async def post_desfazer(request: Request) -> Dict:
    estado = await carregar_estado(request)
    return await aplicar_operacao(request, estado, desfazer_m3(estado))


@router.post("/m3/refazer")
async def post_refazer(request: Request) -> Dict:
    estado = await carregar_estado(request)
    return await aplicar_operacao(request, estado, refazer_m3(estado))


@router.post("/m3/limpar")
async def post_limpar(request: Request) -> Dict:
    estado = await carregar_estado(request)
    return await aplicar_operacao(request, estado, limpar_m3(estado))
