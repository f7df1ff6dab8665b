"""
patterns/ciclo.py

🔮 CICLO DE GERAÇÃO - Colapso Elite
Combina módulos de entrada + histórico, analisa uma única vez e chama o
gerador de sequências várias vezes para montar:
    - Matriz principal (1º ao 7º prêmio)
    - Tríade de milhares elite (candidatos)
    - Predições avançadas (centenas, dezenas, dezenas elite, super dezenas)

Todas as chamadas do ciclo dividem a mesma lista session_used, que é
descartada ao final.
"""

import random
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Sequence
import logging

from patterns.frequencia import (
    CombinedAnalysis,
    DataSet,
    FrequencyAnalyzer,
    Row,
    combine,
    flatten,
)
from patterns.ressonancia import ResonanceScorer
from patterns.sequencia import SequenceGenerator
from core.records import HitRecord, RectificationRecord
from utils.constants import (
    TOTAL_PREMIOS,
    TOTAL_CANDIDATOS,
    FATOR_ENTROPIA_CANDIDATOS,
    CONFIANCA_CANDIDATO_BASE,
    CONFIANCA_CANDIDATO_VARIACAO,
    FAMILIAS_AVANCADAS,
)
from utils.helpers import digitos_para_str, tamanho_linha

logger = logging.getLogger(__name__)


@dataclass
class Candidate:
    sequence: Row
    confidence: float


@dataclass
class Prediction:
    value: str
    confidence: float


@dataclass
class AdvancedPredictions:
    hundreds: List[Prediction] = field(default_factory=list)
    tens: List[Prediction] = field(default_factory=list)
    elite_tens: List[Prediction] = field(default_factory=list)
    super_tens: List[Prediction] = field(default_factory=list)


@dataclass
class CycleResult:
    result: DataSet
    candidates: List[Candidate]
    advanced_predictions: AdvancedPredictions
    analysis: CombinedAnalysis

    def to_dict(self) -> Dict[str, Any]:
        return {
            "result": [list(r) for r in self.result],
            "candidates": [asdict(c) for c in self.candidates],
            "advanced_predictions": asdict(self.advanced_predictions),
            "analysis": self.analysis.to_dict(),
        }


def run_cycle(
    modules: Sequence[DataSet],
    history: Sequence[DataSet],
    hits: Sequence[HitRecord],
    rectifications: Sequence[RectificationRecord],
    entropy: float = 0.5,
    rng: Optional[random.Random] = None,
    scorer: Optional[ResonanceScorer] = None,
) -> CycleResult:
    """
    Executa um ciclo completo de geração

    Args:
        modules: DataSets dos módulos de entrada
        history: Histórico (mais recente primeiro)
        hits: Acertos registrados (alimentam o peso histórico)
        rectifications: Retificações registradas (ainda não usadas na pontuação)
        entropy: 0..1, largura da janela de sorteio
        rng: Fonte de aleatoriedade (injete uma semente para reproduzir)
        scorer: ResonanceScorer configurado

    Returns:
        CycleResult

    Qualquer exceção interrompe o ciclo inteiro; não há resultado parcial.
    """
    rng = rng or random.Random()
    generator = SequenceGenerator(scorer, rng)

    combined_rows = flatten(list(modules) + list(history))
    input_analysis = FrequencyAnalyzer().analyze(combined_rows)
    analysis = combine(input_analysis)

    logger.debug(
        f"Ciclo: {len(combined_rows)} linhas, {input_analysis.total_digitos} dígitos, "
        f"{len(hits)} acertos, {len(rectifications)} retificações, entropia={entropy}"
    )

    session_used: List[str] = []

    # Matriz principal (1º ao 7º)
    result: DataSet = [
        generator.generate(analysis, hits, entropy, i + 1, tamanho_linha(i), session_used)
        for i in range(TOTAL_PREMIOS)
    ]

    # Tríade de milhares elite
    candidates = [
        Candidate(
            sequence=generator.generate(
                analysis, hits, entropy * FATOR_ENTROPIA_CANDIDATOS, 1, 4, session_used
            ),
            confidence=CONFIANCA_CANDIDATO_BASE + rng.random() * CONFIANCA_CANDIDATO_VARIACAO,
        )
        for _ in range(TOTAL_CANDIDATOS)
    ]

    # Predições avançadas
    advanced = AdvancedPredictions()
    for familia, (quantidade, tamanho, parametros) in FAMILIAS_AVANCADAS.items():
        itens = getattr(advanced, familia)
        for i in range(quantidade):
            entropia_fixa, confianca = parametros[min(i, len(parametros) - 1)]
            valor = generator.generate(analysis, hits, entropia_fixa, 1, tamanho, session_used)
            itens.append(Prediction(value=digitos_para_str(valor), confidence=confianca))

    logger.debug(f"Ciclo concluído: {len(session_used)} sequências na sessão")

    return CycleResult(
        result=result,
        candidates=candidates,
        advanced_predictions=advanced,
        analysis=analysis,
    )
