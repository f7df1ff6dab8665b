# ========== routes/historico.py ==========
"""
Rotas dos históricos: entradas, acertos e retificações
"""

from fastapi import APIRouter, Request, HTTPException
from pydantic import BaseModel, Field
from typing import Dict, Optional
from datetime import datetime

from core.painel import marcar_acerto, retificar, apagar_item, limpar_historico
from core.store import EstadoInvalidoError
from helpers.estado import carregar_estado, aplicar_operacao

router = APIRouter()

# nome público -> campo do snapshot
CAMPOS = {
    "entradas": "history",
    "acertos": "hits",
    "retificacoes": "rect",
}


class AcertoIn(BaseModel):
    value: str
    type: str
    position: int = Field(..., ge=1, le=7)
    status: Optional[str] = None


class RetificacaoIn(BaseModel):
    generated: str
    actual: str
    type: str
    rank_label: str


def _campo(nome: str) -> str:
    if nome not in CAMPOS:
        raise HTTPException(status_code=404, detail=f"Histórico desconhecido: {nome}")
    return CAMPOS[nome]


@router.get("/{nome}")
async def get_historico(request: Request, nome: str) -> Dict:
    """
    Lista um histórico (mais recente primeiro)

    Args:
        nome: entradas, acertos ou retificacoes
    """
    campo = _campo(nome)
    estado = await carregar_estado(request)
    itens = getattr(estado, campo)
    if campo != "history":
        itens = [r.to_dict() for r in itens]

    return {
        "historico": nome,
        "timestamp": datetime.now().isoformat(),
        "total": len(itens),
        "itens": itens,
    }


@router.post("/acertos")
async def post_acerto(request: Request, body: AcertoIn) -> Dict:
    """Confirma um acerto (status padrão: Acerto)"""
    estado = await carregar_estado(request)
    try:
        op = marcar_acerto(estado, body.value, body.type, body.position, body.status)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return await aplicar_operacao(request, estado, op)


@router.post("/retificacoes")
async def post_retificacao(request: Request, body: RetificacaoIn) -> Dict:
    """Registra uma retificação manual (gerado x real)"""
    estado = await carregar_estado(request)
    try:
        op = retificar(estado, body.generated, body.actual, body.type, body.rank_label)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return await aplicar_operacao(request, estado, op)


@router.delete("/{nome}/{idx}")
async def delete_item(request: Request, nome: str, idx: int) -> Dict:
    """Remove um item pelo índice"""
    campo = _campo(nome)
    estado = await carregar_estado(request)
    try:
        op = apagar_item(estado, campo, idx)
    except EstadoInvalidoError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return await aplicar_operacao(request, estado, op)


@router.delete("/{nome}")
async def delete_historico(request: Request, nome: str) -> Dict:
    """Limpa o histórico inteiro"""
    campo = _campo(nome)
    estado = await carregar_estado(request)
    return await aplicar_operacao(request, estado, limpar_historico(estado, campo))
