"""
core/records.py

Registros de feedback: acertos (HitRecord) e retificações (RectificationRecord)
Criados uma única vez e nunca alterados; o usuário só pode incluir ou apagar.
"""

import time
import uuid
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from utils.constants import TIPOS, STATUS, STATUS_ACERTO


def _agora_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class HitRecord:
    id: str
    value: str
    type: str
    position: int
    status: str
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HitRecord":
        return cls(
            id=str(data.get("id", "")),
            value=str(data.get("value", "")),
            type=str(data.get("type", "")),
            position=int(data.get("position", 0)),
            status=str(data.get("status", STATUS_ACERTO)),
            timestamp=int(data.get("timestamp", 0)),
        )


@dataclass(frozen=True)
class RectificationRecord:
    id: str
    generated: str
    actual: str
    type: str
    rank_label: str
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RectificationRecord":
        return cls(
            id=str(data.get("id", "")),
            generated=str(data.get("generated", "")),
            actual=str(data.get("actual", "")),
            type=str(data.get("type", "")),
            rank_label=str(data.get("rank_label", "")),
            timestamp=int(data.get("timestamp", 0)),
        )


def novo_acerto(
    value: str,
    type: str,
    position: int,
    status: Optional[str] = None,
) -> HitRecord:
    """
    Monta um HitRecord

    Args:
        value: Valor gerado que acertou
        type: Centena, Dezena ou Milhar
        position: Prêmio (1-based)
        status: Acerto (padrão) ou Quase Acerto

    Raises:
        ValueError: tipo ou status desconhecido
    """
    status = status or STATUS_ACERTO
    if type not in TIPOS:
        raise ValueError(f"Tipo inválido: {type}")
    if status not in STATUS:
        raise ValueError(f"Status inválido: {status}")

    return HitRecord(
        id=str(uuid.uuid4()),
        value=value,
        type=type,
        position=int(position),
        status=status,
        timestamp=_agora_ms(),
    )


def nova_retificacao(
    generated: str,
    actual: str,
    type: str,
    rank_label: str,
) -> RectificationRecord:
    """Monta um RectificationRecord (gerado x real)"""
    if type not in TIPOS:
        raise ValueError(f"Tipo inválido: {type}")

    return RectificationRecord(
        id=str(uuid.uuid4()),
        generated=generated,
        actual=actual,
        type=type,
        rank_label=rank_label,
        timestamp=_agora_ms(),
    )


def mark_hit(
    hits: List[HitRecord],
    value: str,
    type: str,
    position: int,
    status: Optional[str] = None,
) -> List[HitRecord]:
    """Retorna nova lista de acertos com o registro na frente (mais recente primeiro)"""
    return [novo_acerto(value, type, position, status)] + list(hits)


def manual_rectify(
    rects: List[RectificationRecord],
    generated: str,
    actual: str,
    type: str,
    rank_label: str,
) -> List[RectificationRecord]:
    """Retorna nova lista de retificações com o registro na frente"""
    return [nova_retificacao(generated, actual, type, rank_label)] + list(rects)
