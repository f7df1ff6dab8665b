"""
core/store.py

Estado persistido do painel em chaves Redis (valores JSON).

O motor nunca escreve no store durante a geração: lê um EstadoSnapshot
imutável e devolve um dicionário de mutações aplicado depois com aplicar().
"""

import json
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional
import logging

from core.records import HitRecord, RectificationRecord
from utils.constants import VETOR_VAZIO, ENTROPIA_PADRAO

logger = logging.getLogger(__name__)

Mutacoes = Dict[str, Any]


class EstadoInvalidoError(Exception):
    """Valor persistido ilegível ou mutação desconhecida."""
    pass


def _vetor_vazio() -> List[str]:
    return list(VETOR_VAZIO)


@dataclass(frozen=True)
class EstadoSnapshot:
    history: List[List[List[int]]] = field(default_factory=list)
    hits: List[HitRecord] = field(default_factory=list)
    rect: List[RectificationRecord] = field(default_factory=list)
    settings: Dict[str, Any] = field(
        default_factory=lambda: {"entropy": ENTROPIA_PADRAO, "voice_enabled": True}
    )
    m1: List[str] = field(default_factory=_vetor_vazio)
    m2: List[str] = field(default_factory=_vetor_vazio)
    m3: List[str] = field(default_factory=_vetor_vazio)
    m3_history: List[List[str]] = field(default_factory=lambda: [_vetor_vazio()])
    m3_idx: int = 0
    last_res: Optional[List[List[int]]] = None
    last_cand: Optional[List[Dict[str, Any]]] = None
    last_adv: Optional[Dict[str, Any]] = None
    last_ana: Optional[Dict[str, Any]] = None
    locked: bool = False

    @property
    def entropy(self) -> float:
        return float(self.settings.get("entropy", ENTROPIA_PADRAO))

    @property
    def voice_enabled(self) -> bool:
        return bool(self.settings.get("voice_enabled", True))

    def com(self, mutacoes: Mutacoes) -> "EstadoSnapshot":
        """Novo snapshot com as mutações aplicadas (o original não muda)"""
        validar_mutacoes(mutacoes)
        return replace(self, **mutacoes)


CAMPOS = tuple(f.name for f in fields(EstadoSnapshot))


def validar_mutacoes(mutacoes: Mutacoes) -> None:
    desconhecidas = set(mutacoes) - set(CAMPOS)
    if desconhecidas:
        raise EstadoInvalidoError(f"Campos desconhecidos: {sorted(desconhecidas)}")


def _serializar(campo: str, valor: Any) -> str:
    if campo == "hits" or campo == "rect":
        valor = [r.to_dict() for r in valor]
    return json.dumps(valor, ensure_ascii=False)


def _desserializar(campo: str, bruto: str) -> Any:
    valor = json.loads(bruto)
    if campo == "hits":
        return [HitRecord.from_dict(d) for d in valor]
    if campo == "rect":
        return [RectificationRecord.from_dict(d) for d in valor]
    if campo == "m3_idx":
        return int(valor)
    if campo == "locked":
        return bool(valor)
    return valor


class EstadoStore:
    """
    Leitura e escrita do estado no Redis

    Args:
        client: redis.asyncio.Redis (decode_responses=True)
        prefix: prefixo das chaves (padrão: dh_v25)
        default_settings: configurações iniciais quando a chave não existe
    """

    def __init__(self, client, prefix: str = "dh_v25", default_settings: Optional[Dict[str, Any]] = None):
        self.client = client
        self.prefix = prefix
        self.default_settings = default_settings

    def key(self, campo: str) -> str:
        return f"{self.prefix}_{campo}"

    async def carregar(self) -> EstadoSnapshot:
        """Lê todas as chaves e monta o snapshot (padrões para chaves ausentes)"""
        brutos = await self.client.mget([self.key(c) for c in CAMPOS])

        valores: Dict[str, Any] = {}
        for campo, bruto in zip(CAMPOS, brutos):
            if bruto is None:
                continue
            try:
                valores[campo] = _desserializar(campo, bruto)
            except (ValueError, TypeError, AttributeError) as exc:
                logger.error(f"❌ Valor inválido em {self.key(campo)}: {exc}")
                raise EstadoInvalidoError(f"Valor inválido em {self.key(campo)}") from exc

        if "settings" not in valores and self.default_settings is not None:
            valores["settings"] = dict(self.default_settings)
        if "m3_history" not in valores and "m3" in valores:
            valores["m3_history"] = [list(valores["m3"])]

        return EstadoSnapshot(**valores)

    async def aplicar(self, mutacoes: Mutacoes) -> None:
        """Grava as mutações (última escrita vence)"""
        if not mutacoes:
            return
        validar_mutacoes(mutacoes)

        await self.client.mset({
            self.key(campo): _serializar(campo, valor)
            for campo, valor in mutacoes.items()
        })
        logger.debug(f"Estado atualizado: {sorted(mutacoes)}")
