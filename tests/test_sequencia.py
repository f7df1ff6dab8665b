"""
tests/test_sequencia.py

Montagem e corte de sequências
"""

import random

import pytest

from patterns.frequencia import analyze_set, combine
from patterns.sequencia import SequenceGenerator, generate_sequence, truncate


@pytest.fixture
def vazia():
    return combine(analyze_set([]))


@pytest.mark.parametrize("length,esperado", [
    (4, [1, 2, 3, 4]),
    (3, [2, 3, 4]),
    (2, [3, 4]),
])
def test_truncate(length, esperado):
    assert truncate([1, 2, 3, 4], length) == esperado


@pytest.mark.parametrize("length", [3, 2])
def test_corte_igual_ao_final_da_sequencia_completa(dataset_basico, length):
    analise = combine(analyze_set(dataset_basico))

    completa = generate_sequence(analise, [], 0.9, 2, 4, [], rng=random.Random(99))
    cortada = generate_sequence(analise, [], 0.9, 2, length, [], rng=random.Random(99))

    assert cortada == completa[4 - length:]


def test_registra_na_sessao(vazia):
    session_used = []
    seq = generate_sequence(vazia, [], 0.0, 1, 2, session_used)

    assert session_used == ["".join(map(str, seq))]
    assert len(seq) == 2


def test_repeticao_e_sessao_espalham_digitos(vazia):
    gerador = SequenceGenerator(rng=random.Random(0))
    session_used = []

    primeira = gerador.generate(vazia, [], 0.0, 1, 4, session_used)
    segunda = gerador.generate(vazia, [], 0.0, 1, 4, session_used)
    terceira = gerador.generate(vazia, [], 0.0, 1, 4, session_used)

    assert primeira == [0, 1, 2, 3]
    assert segunda == [4, 5, 6, 7]
    assert terceira == [8, 9, 0, 1]
    assert session_used == ["0123", "4567", "8901"]
