"""
patterns/retificacao.py

Auto-correção: compara a matriz gerada com os valores reais colados,
classifica acertos e gera o histórico de ajustes.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import logging

from core.records import (
    HitRecord,
    RectificationRecord,
    novo_acerto,
    nova_retificacao,
)
from utils.constants import (
    INDICE_CENTENA,
    MIN_MATCH,
    STATUS_ACERTO,
    STATUS_QUASE,
    TIPO_CENTENA,
    TIPO_MILHAR,
    MSG_ACERTO,
    MSG_QUASE,
    MSG_ASSIMILADO,
)
from utils.helpers import digitos_para_str, rotulo_premio

logger = logging.getLogger(__name__)


@dataclass
class AutoCorrecao:
    hits: List[HitRecord] = field(default_factory=list)
    rectifications: List[RectificationRecord] = field(default_factory=list)

    @property
    def mensagem(self) -> str:
        if any(h.status == STATUS_ACERTO for h in self.hits):
            return MSG_ACERTO
        if any(h.status == STATUS_QUASE for h in self.hits):
            return MSG_QUASE
        return MSG_ASSIMILADO


def classificar(gerado: str, real: str, tipo: str) -> Optional[str]:
    """
    Classifica gerado x real

    Ordem:
        1. igual -> Acerto
        2. mesmos dígitos em outra ordem -> Quase Acerto
        3. acertos posicionais >= 3 (Milhar) ou >= 2 (Centena) -> Quase Acerto

    Returns:
        Status ou None quando não há acerto
    """
    if gerado == real:
        return STATUS_ACERTO

    if sorted(gerado) == sorted(real):
        return STATUS_QUASE

    matches = sum(1 for g, r in zip(gerado, real) if g == r)
    if matches >= MIN_MATCH.get(tipo, MIN_MATCH[TIPO_MILHAR]):
        return STATUS_QUASE

    return None


def auto_correct(result: Sequence[Sequence[int]], actual_values: Sequence[str]) -> AutoCorrecao:
    """
    Compara cada prêmio gerado com o valor real

    Args:
        result: Matriz gerada (7 linhas)
        actual_values: Valores reais, um por prêmio (vazios ou curtos são ignorados)

    Returns:
        AutoCorrecao com os acertos e UMA retificação por prêmio comparado
    """
    saida = AutoCorrecao()

    for idx, real in enumerate(actual_values):
        if not real or len(real) < 3 or idx >= len(result):
            continue

        gerado = digitos_para_str(result[idx])
        tipo = TIPO_CENTENA if idx == INDICE_CENTENA else TIPO_MILHAR
        rank_label = rotulo_premio(idx + 1)

        status = classificar(gerado, real, tipo)
        if status:
            saida.hits.append(novo_acerto(gerado, tipo, idx + 1, status))

        saida.rectifications.append(nova_retificacao(gerado, real, tipo, rank_label))

    logger.info(
        f"Auto-correção: {len(saida.rectifications)} prêmios comparados, "
        f"{len(saida.hits)} acertos"
    )
    return saida
