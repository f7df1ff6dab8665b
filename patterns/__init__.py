# ========== patterns/__init__.py ==========
"""
Motor de geração: frequência, ressonância, sequência, ciclo e retificação
"""

from patterns.base import BasePattern, PatternResult
from patterns.frequencia import (
    AnalysisResult,
    CombinedAnalysis,
    FrequencyAnalyzer,
    analyze_set,
)
from patterns.ressonancia import ResonanceScorer
from patterns.sequencia import SequenceGenerator, generate_sequence
from patterns.ciclo import (
    Candidate,
    Prediction,
    AdvancedPredictions,
    CycleResult,
    run_cycle,
)
from patterns.retificacao import auto_correct, classificar
from patterns.entrada import parse_modules, parse_paste_text

__all__ = [
    'BasePattern',
    'PatternResult',
    'AnalysisResult',
    'CombinedAnalysis',
    'FrequencyAnalyzer',
    'analyze_set',
    'ResonanceScorer',
    'SequenceGenerator',
    'generate_sequence',
    'Candidate',
    'Prediction',
    'AdvancedPredictions',
    'CycleResult',
    'run_cycle',
    'auto_correct',
    'classificar',
    'parse_modules',
    'parse_paste_text',
]
