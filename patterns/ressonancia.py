"""
patterns/ressonancia.py

⚡ MOTOR DE RESSONÂNCIA - Colapso por dígito
Para uma posição da sequência, combina os sinais de frequência e de acertos
históricos em uma resistência por dígito (menor resistência = mais forte) e
sorteia dentro de uma janela controlada pela entropia.

Foco no 1º prêmio: o rank 1 recebe o maior peso da frequência de 1º prêmio
e a janela de sorteio mais estreita.
"""

import math
import random
from typing import Any, Dict, Iterable, List, Optional, Sequence
import logging

from patterns.base import BasePattern, PatternResult
from patterns.frequencia import CombinedAnalysis
from core.records import HitRecord
from utils.constants import DIGITOS, RESSONANCIA_PADRAO, STATUS_ACERTO

logger = logging.getLogger(__name__)


class ResonanceScorer(BasePattern):
    """
    Pontuador de ressonância

    Config (todas opcionais, padrão em RESSONANCIA_PADRAO):
        - resistencia_base
        - peso_global, peso_coluna
        - peso_primeiro_premio (rank 1), peso_premio_alto (rank 2-3)
        - peso_historico (por acerto no mesmo rank)
        - penalidade_repeticao, penalidade_sessao
    """

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.pesos = {
            chave: float(self.get_config_value(chave, padrao))
            for chave, padrao in RESSONANCIA_PADRAO.items()
        }

    # ------------------------------------------------------------------
    # Sinais
    # ------------------------------------------------------------------

    def _peso_premio(self, rank: int) -> float:
        if rank == 1:
            return self.pesos["peso_primeiro_premio"]
        if rank in (2, 3):
            return self.pesos["peso_premio_alto"]
        return 0.0

    @staticmethod
    def _acertos_no_rank(hits: Iterable[HitRecord], rank: int) -> List[str]:
        return [
            h.value for h in hits
            if h.position == rank and h.status == STATUS_ACERTO
        ]

    def resonance(
        self,
        analysis: CombinedAnalysis,
        digito: int,
        entropy: float,
        position: int,
        rank: int,
        valores_acerto: Sequence[str],
        prior_digits: Sequence[int],
        session_used: Sequence[str],
    ) -> float:
        """Ressonância agregada de um dígito (antes de virar resistência)"""
        ia = analysis.input_analysis
        digito_str = str(digito)
        col = ia.col_digit_freq[position] if 0 <= position < len(ia.col_digit_freq) else {}

        valor = ia.global_digit_freq.get(digito, 0) * self.pesos["peso_global"]
        valor += col.get(digito, 0) * self.pesos["peso_coluna"]
        valor += ia.first_prize_freq.get(digito, 0) * self._peso_premio(rank)

        # Aprendizado por acertos
        historic_weight = sum(1 for v in valores_acerto if digito_str in v)
        valor += historic_weight * self.pesos["peso_historico"]

        # Repetição dentro da sequência atual
        if digito in prior_digits:
            valor -= self.pesos["penalidade_repeticao"] * (1.1 - entropy)

        # Dispersão na sessão
        if any(digito_str in s for s in session_used):
            valor -= self.pesos["penalidade_sessao"]

        return valor

    # ------------------------------------------------------------------
    # Análise
    # ------------------------------------------------------------------

    def analyze(
        self,
        analysis: CombinedAnalysis,
        hits: Sequence[HitRecord],
        entropy: float,
        position: int,
        rank: int,
        prior_digits: Optional[Sequence[int]] = None,
        session_used: Optional[Sequence[str]] = None,
    ) -> PatternResult:
        """
        Calcula a resistência de cada dígito para uma posição

        Returns:
            PatternResult com candidatos em ordem crescente de resistência,
            scores = resistência, metadata com a janela de sorteio
        """
        prior_digits = prior_digits or []
        session_used = session_used or []
        valores_acerto = self._acertos_no_rank(hits, rank)

        resistencias: Dict[int, float] = {}
        for digito in DIGITOS:
            valor = self.resonance(
                analysis, digito, entropy, position, rank,
                valores_acerto, prior_digits, session_used,
            )
            resistencias[digito] = self.pesos["resistencia_base"] - valor / (1 + entropy)

        # sorted é estável: empate mantém o menor dígito na frente
        candidatos = sorted(DIGITOS, key=lambda d: resistencias[d])

        return PatternResult(
            candidatos=candidatos,
            scores=resistencias,
            metadata={
                "janela": self.window_size(entropy, rank),
                "rank": rank,
                "position": position,
                "entropy": entropy,
                "acertos_considerados": len(valores_acerto),
            },
            pattern_name="RESSONANCIA",
        )

    @staticmethod
    def window_size(entropy: float, rank: int) -> int:
        """Janela de sorteio: rank 1 mais estreita"""
        fator = 2 if rank == 1 else 4
        return max(1, math.floor(entropy * fator))

    def score_digit(
        self,
        analysis: CombinedAnalysis,
        hits: Sequence[HitRecord],
        entropy: float,
        position: int,
        rank: int,
        prior_digits: Optional[Sequence[int]] = None,
        session_used: Optional[Sequence[str]] = None,
        rng: Optional[random.Random] = None,
    ) -> int:
        """
        Colapsa a posição em um dígito

        Sorteia um índice uniforme em [0, janela) na lista ordenada.
        Índice fora da lista cai no dígito de menor resistência.
        """
        rng = rng or random.Random()
        resultado = self.analyze(
            analysis, hits, entropy, position, rank, prior_digits, session_used
        )
        janela = resultado.metadata["janela"]
        idx = math.floor(rng.random() * janela)

        if 0 <= idx < len(resultado.candidatos):
            return resultado.candidatos[idx]
        return resultado.candidatos[0]
