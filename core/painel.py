"""
core/painel.py

Fluxos do painel sobre um EstadoSnapshot.

Cada função é pura: recebe o snapshot, devolve uma Operacao com as
mutações a gravar, uma mensagem de retorno (texto falado pelo front quando
a voz está ativa) e os dados para a resposta.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
import logging

from core.records import mark_hit, manual_rectify
from core.store import EstadoSnapshot, EstadoInvalidoError, Mutacoes
from patterns.ciclo import run_cycle
from patterns.entrada import parse_modules, vetor_para_dataset
from patterns.ressonancia import ResonanceScorer
from patterns.retificacao import auto_correct
from utils.constants import (
    TOTAL_PREMIOS,
    VETOR_VAZIO,
    MSG_GERACAO,
    MSG_MEMORIA_LIMPA,
)
from utils.helpers import sanitizar_entrada, tamanho_linha

logger = logging.getLogger(__name__)

HISTORICOS = ("history", "hits", "rect")


class MatrizBloqueadaError(Exception):
    """Geração pedida com a matriz já manifestada (travada)."""
    pass


@dataclass
class Operacao:
    mutacoes: Mutacoes = field(default_factory=dict)
    mensagem: Optional[str] = None
    dados: Dict[str, Any] = field(default_factory=dict)


def append_history(history: Sequence[Any], dataset: Any, max_size: int = 300) -> List[Any]:
    """Insere na frente e corta o final para manter no máximo max_size"""
    return ([dataset] + list(history))[:max_size]


def _vetor(valores: Sequence[str]) -> List[str]:
    vetor = [str(v or "") for v in list(valores)[:TOTAL_PREMIOS]]
    return vetor + [""] * (TOTAL_PREMIOS - len(vetor))


def _vetor_colado(valores: Sequence[str]) -> List[str]:
    """Sem espaços e cortado em 4 dígitos (3 na centena)"""
    return ["".join(v.split())[:tamanho_linha(i)] for i, v in enumerate(_vetor(valores))]


# ======================================================================
# GERAÇÃO
# ======================================================================

def gerar(
    estado: EstadoSnapshot,
    rng: Optional[random.Random] = None,
    scorer: Optional[ResonanceScorer] = None,
) -> Operacao:
    """
    Roda o ciclo com M1, M2, M3 + histórico e trava a matriz

    Raises:
        MatrizBloqueadaError: se a matriz já estiver travada
    """
    if estado.locked:
        raise MatrizBloqueadaError("Matriz já manifestada. Cole um novo resultado para liberar.")

    modules, errors = parse_modules([estado.m1, estado.m2, estado.m3])
    for erro in errors:
        logger.warning(f"⚠️  {erro}")

    ciclo = run_cycle(
        modules, estado.history, estado.hits, estado.rect,
        entropy=estado.entropy, rng=rng, scorer=scorer,
    )
    saida = ciclo.to_dict()

    logger.info(f"🔮 Matriz gerada: {[''.join(map(str, r)) for r in ciclo.result]}")

    return Operacao(
        mutacoes={
            "last_res": saida["result"],
            "last_cand": saida["candidates"],
            "last_adv": saida["advanced_predictions"],
            "last_ana": saida["analysis"],
            "locked": True,
        },
        mensagem=MSG_GERACAO,
        dados={**saida, "errors": errors},
    )


# ======================================================================
# MÓDULO 3 (ONDA-REAL)
# ======================================================================

def colar_m3(
    estado: EstadoSnapshot,
    valores: Sequence[str],
    max_history: int = 300,
    max_m3_history: int = 50,
) -> Operacao:
    """
    Novo resultado real no M3

    1. Auto-correção contra a última matriz gerada
    2. Desloca os módulos (M1 <- M2, M2 <- M3, M3 <- novo)
    3. Empilha o vetor na navegação do M3 (descarta o "refazer")
    4. Insere o DataSet no histórico e libera a matriz

    Raises:
        ValueError: se nenhuma linha tiver conteúdo
    """
    vetor = _vetor_colado(valores)
    if not any(vetor):
        raise ValueError("Nada para colar no M3")
    mutacoes: Mutacoes = {}
    mensagem = None
    novos_acertos = 0

    if estado.last_res:
        correcao = auto_correct(estado.last_res, vetor)
        if correcao.hits:
            mutacoes["hits"] = correcao.hits + list(estado.hits)
        if correcao.rectifications:
            mutacoes["rect"] = correcao.rectifications + list(estado.rect)
        mensagem = correcao.mensagem
        novos_acertos = len(correcao.hits)

    navegacao = [list(v) for v in estado.m3_history[:estado.m3_idx + 1]] + [vetor]
    navegacao = navegacao[-max_m3_history:]

    mutacoes.update({
        "m1": list(estado.m2),
        "m2": list(estado.m3),
        "m3": vetor,
        "m3_history": navegacao,
        "m3_idx": len(navegacao) - 1,
        "history": append_history(estado.history, vetor_para_dataset(vetor), max_history),
        "locked": False,
    })

    logger.info(f"📥 M3 colado: {vetor} ({novos_acertos} acertos)")
    return Operacao(mutacoes=mutacoes, mensagem=mensagem, dados={"m3": vetor, "acertos": novos_acertos})


def editar_m3(estado: EstadoSnapshot, valores: Sequence[str]) -> Operacao:
    """Edição manual campo a campo (apenas dígitos, 4 ou 3 por linha)"""
    vetor = [sanitizar_entrada(v, i) for i, v in enumerate(_vetor(valores))]
    return Operacao(mutacoes={"m3": vetor, "locked": False}, dados={"m3": vetor})


def desfazer_m3(estado: EstadoSnapshot) -> Operacao:
    if estado.m3_idx <= 0:
        return Operacao(dados={"m3": list(estado.m3)})
    idx = estado.m3_idx - 1
    vetor = list(estado.m3_history[idx])
    return Operacao(mutacoes={"m3": vetor, "m3_idx": idx, "locked": False}, dados={"m3": vetor})


def refazer_m3(estado: EstadoSnapshot) -> Operacao:
    if estado.m3_idx >= len(estado.m3_history) - 1:
        return Operacao(dados={"m3": list(estado.m3)})
    idx = estado.m3_idx + 1
    vetor = list(estado.m3_history[idx])
    return Operacao(mutacoes={"m3": vetor, "m3_idx": idx, "locked": False}, dados={"m3": vetor})


def limpar_m3(estado: EstadoSnapshot) -> Operacao:
    return Operacao(
        mutacoes={"m3": list(VETOR_VAZIO), "m3_history": [list(VETOR_VAZIO)], "m3_idx": 0},
        mensagem=MSG_MEMORIA_LIMPA,
        dados={"m3": list(VETOR_VAZIO)},
    )


# ======================================================================
# CONFIGURAÇÕES
# ======================================================================

def atualizar_settings(
    estado: EstadoSnapshot,
    entropy: Optional[float] = None,
    voice_enabled: Optional[bool] = None,
) -> Operacao:
    novo = dict(estado.settings)
    if entropy is not None:
        novo["entropy"] = min(1.0, max(0.0, float(entropy)))
    if voice_enabled is not None:
        novo["voice_enabled"] = bool(voice_enabled)
    return Operacao(mutacoes={"settings": novo}, dados=novo)


# ======================================================================
# FEEDBACK / HISTÓRICOS
# ======================================================================

def marcar_acerto(
    estado: EstadoSnapshot,
    value: str,
    type: str,
    position: int,
    status: Optional[str] = None,
) -> Operacao:
    hits = mark_hit(estado.hits, value, type, position, status)
    return Operacao(mutacoes={"hits": hits}, dados=hits[0].to_dict())


def retificar(
    estado: EstadoSnapshot,
    generated: str,
    actual: str,
    type: str,
    rank_label: str,
) -> Operacao:
    rects = manual_rectify(estado.rect, generated, actual, type, rank_label)
    return Operacao(mutacoes={"rect": rects}, dados=rects[0].to_dict())


def apagar_item(estado: EstadoSnapshot, campo: str, idx: int) -> Operacao:
    """
    Remove um item de um histórico pelo índice

    Raises:
        EstadoInvalidoError: campo desconhecido ou índice fora da lista
    """
    if campo not in HISTORICOS:
        raise EstadoInvalidoError(f"Histórico desconhecido: {campo}")
    itens = list(getattr(estado, campo))
    if not 0 <= idx < len(itens):
        raise EstadoInvalidoError(f"Índice {idx} fora do histórico {campo} ({len(itens)} itens)")
    del itens[idx]
    return Operacao(mutacoes={campo: itens}, dados={"total": len(itens)})


def limpar_historico(estado: EstadoSnapshot, campo: str) -> Operacao:
    if campo not in HISTORICOS:
        raise EstadoInvalidoError(f"Histórico desconhecido: {campo}")
    return Operacao(mutacoes={campo: []}, dados={"total": 0})
