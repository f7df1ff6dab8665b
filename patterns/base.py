"""
patterns/base.py

Classe base abstrata para os componentes de análise do motor
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any
from dataclasses import dataclass


@dataclass
class PatternResult:
    """
    Resultado da análise de um componente

    Attributes:
        candidatos: Dígitos candidatos, do mais forte para o mais fraco
        scores: Dicionário {dígito: score}
        metadata: Informações adicionais sobre a análise
        pattern_name: Nome do componente que gerou este resultado
    """
    candidatos: List[int]
    scores: Dict[int, float]
    metadata: Dict[str, Any]
    pattern_name: str

    def get_top_n(self, n: int) -> List[tuple[int, float]]:
        """
        Retorna os top N candidatos na ordem de preferência

        Args:
            n: Quantidade de candidatos

        Returns:
            Lista de tuplas (dígito, score)
        """
        return [(d, self.scores[d]) for d in self.candidatos[:n]]


class BasePattern(ABC):
    """
    Classe base abstrata para os componentes do motor

    FrequencyAnalyzer e ResonanceScorer herdam desta classe
    e implementam o método analyze()
    """

    def __init__(self, config: Dict[str, Any] = None):
        """
        Args:
            config: Dicionário de configurações específicas do componente
        """
        self.config = config or {}
        self.name = self.__class__.__name__

    @abstractmethod
    def analyze(self, *args, **kwargs) -> Any:
        """
        Este método DEVE ser implementado por todas as classes filhas

        Raises:
            NotImplementedError: Se não for implementado pela classe filha
        """
        raise NotImplementedError(
            f"O componente {self.name} deve implementar o método analyze()"
        )

    def get_config_value(self, key: str, default: Any) -> Any:
        """
        Obtém valor de configuração com fallback para default
        """
        return self.config.get(key, default)

    def __str__(self) -> str:
        return f"{self.name}(config={self.config})"

    def __repr__(self) -> str:
        return self.__str__()
