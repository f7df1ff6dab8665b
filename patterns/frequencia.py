"""
patterns/frequencia.py

📊 ANÁLISE DE FREQUÊNCIA
Varre as linhas históricas (módulos de entrada + histórico) e monta as
tabelas de frequência por dígito, por coluna e do 1º prêmio.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Sequence
import logging

from patterns.base import BasePattern
from utils.constants import DIGITOS, POSICOES, TOTAL_PREMIOS
from utils.helpers import is_par

logger = logging.getLogger(__name__)

Row = List[int]
DataSet = List[Row]
FrequencyTable = Dict[int, int]


def _tabela_vazia() -> FrequencyTable:
    return {d: 0 for d in DIGITOS}


@dataclass(frozen=True)
class AnalysisResult:
    """
    Resultado imutável da análise de frequência

    Attributes:
        row_sums: Soma dos dígitos de cada linha não vazia
        row_even_odd: {evens, odds} de cada linha não vazia
        row_digit_freq: Frequência de dígitos de cada linha não vazia
        col_digit_freq: Uma tabela por coluna (0..3)
        global_digit_freq: Tabela global
        first_prize_freq: Tabela das linhas de 1º prêmio (índice % 7 == 0)
        total_even_odd: Contagem global de pares/ímpares
    """
    row_sums: List[int] = field(default_factory=list)
    row_even_odd: List[Dict[str, int]] = field(default_factory=list)
    row_digit_freq: List[FrequencyTable] = field(default_factory=list)
    col_digit_freq: List[FrequencyTable] = field(
        default_factory=lambda: [_tabela_vazia() for _ in range(POSICOES)]
    )
    global_digit_freq: FrequencyTable = field(default_factory=_tabela_vazia)
    first_prize_freq: FrequencyTable = field(default_factory=_tabela_vazia)
    total_even_odd: Dict[str, int] = field(
        default_factory=lambda: {"evens": 0, "odds": 0}
    )

    @property
    def total_digitos(self) -> int:
        return sum(self.global_digit_freq.values())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CombinedAnalysis:
    """
    Análise das entradas + histórico.

    historical_analysis["historical_digit_freq"] é o MESMO objeto que
    input_analysis.global_digit_freq (não existe visão só-histórico).
    """
    input_analysis: AnalysisResult
    historical_analysis: Dict[str, FrequencyTable]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input_analysis": self.input_analysis.to_dict(),
            "historical_analysis": {
                k: dict(v) for k, v in self.historical_analysis.items()
            },
        }


class FrequencyAnalyzer(BasePattern):
    """
    Contador de frequências sobre uma lista achatada de linhas.

    A linha de índice i é considerada de 1º prêmio quando i % 7 == 0,
    então a lista deve ser a concatenação de DataSets de 7 linhas.
    """

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.linhas_por_dataset = self.get_config_value("linhas_por_dataset", TOTAL_PREMIOS)

    def analyze(self, rows: Sequence[Row]) -> AnalysisResult:
        """
        Analisa as linhas e retorna as tabelas de frequência

        Args:
            rows: Linhas achatadas (linhas vazias são ignoradas, mas contam no índice)

        Returns:
            AnalysisResult
        """
        result = AnalysisResult()
        ignorados = 0

        for row_index, row in enumerate(rows):
            if not row:
                continue

            is_head = row_index % self.linhas_por_dataset == 0
            freq_linha = _tabela_vazia()
            evens = odds = 0
            soma = 0

            for col_index, d in enumerate(row):
                if d not in result.global_digit_freq:
                    ignorados += 1
                    continue

                soma += d
                freq_linha[d] += 1
                result.global_digit_freq[d] += 1

                if col_index < POSICOES:
                    result.col_digit_freq[col_index][d] += 1

                if is_head:
                    result.first_prize_freq[d] += 1

                if is_par(d):
                    evens += 1
                    result.total_even_odd["evens"] += 1
                else:
                    odds += 1
                    result.total_even_odd["odds"] += 1

            result.row_sums.append(soma)
            result.row_even_odd.append({"evens": evens, "odds": odds})
            result.row_digit_freq.append(freq_linha)

        if ignorados:
            logger.debug(f"{ignorados} valores fora de 0-9 ignorados na análise")

        return result


def flatten(datasets: Sequence[DataSet]) -> List[Row]:
    """Concatena DataSets em uma única lista de linhas"""
    return [list(row) for dataset in datasets for row in dataset]


def analyze_set(rows: Sequence[Row]) -> AnalysisResult:
    """Atalho para FrequencyAnalyzer().analyze(rows)"""
    return FrequencyAnalyzer().analyze(rows)


def combine(input_analysis: AnalysisResult) -> CombinedAnalysis:
    """Envolve a análise em um CombinedAnalysis (visão histórica = tabela global)"""
    return CombinedAnalysis(
        input_analysis=input_analysis,
        historical_analysis={"historical_digit_freq": input_analysis.global_digit_freq},
    )
