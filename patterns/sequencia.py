"""
patterns/sequencia.py

Monta uma sequência de 4 dígitos posição a posição e corta para 3 ou 2
"""

import random
from typing import List, Optional, Sequence

from patterns.frequencia import CombinedAnalysis
from patterns.ressonancia import ResonanceScorer
from core.records import HitRecord
from utils.constants import POSICOES
from utils.helpers import digitos_para_str


def truncate(seq: Sequence[int], length: int) -> List[int]:
    """
    Corte da sequência completa

    Exemplo:
        truncate([1, 2, 3, 4], 3) -> [2, 3, 4]
        truncate([1, 2, 3, 4], 2) -> [3, 4]
    """
    if length == 3:
        return list(seq[1:4])
    if length == 2:
        return list(seq[2:4])
    return list(seq)


class SequenceGenerator:
    """Gera sequências usando um ResonanceScorer e uma fonte de aleatoriedade"""

    def __init__(self, scorer: Optional[ResonanceScorer] = None, rng: Optional[random.Random] = None):
        self.scorer = scorer or ResonanceScorer()
        self.rng = rng or random.Random()

    def generate(
        self,
        analysis: CombinedAnalysis,
        hits: Sequence[HitRecord],
        entropy: float,
        rank: int,
        length: int,
        session_used: List[str],
    ) -> List[int]:
        """
        Pontua as 4 posições em ordem, passando os dígitos já escolhidos
        para a próxima posição, corta no tamanho pedido e registra o
        resultado em session_used.
        """
        seq: List[int] = []
        for position in range(POSICOES):
            seq.append(
                self.scorer.score_digit(
                    analysis, hits, entropy, position, rank,
                    prior_digits=seq, session_used=session_used, rng=self.rng,
                )
            )

        final = truncate(seq, length)
        session_used.append(digitos_para_str(final))
        return final


def generate_sequence(
    analysis: CombinedAnalysis,
    hits: Sequence[HitRecord],
    entropy: float,
    rank: int,
    length: int,
    session_used: List[str],
    rng: Optional[random.Random] = None,
    scorer: Optional[ResonanceScorer] = None,
) -> List[int]:
    """Atalho funcional para SequenceGenerator.generate"""
    return SequenceGenerator(scorer, rng).generate(
        analysis, hits, entropy, rank, length, session_used
    )
