"""
tests/test_ciclo.py

Ciclo completo de geração
"""

import random

import pytest

from patterns.ciclo import run_cycle
from tests.conftest import make_dataset, make_hit


def _valores(ciclo):
    adv = ciclo.advanced_predictions
    return {
        "result": ciclo.result,
        "candidates": [c.sequence for c in ciclo.candidates],
        "hundreds": [p.value for p in adv.hundreds],
        "tens": [p.value for p in adv.tens],
        "elite_tens": [p.value for p in adv.elite_tens],
        "super_tens": [p.value for p in adv.super_tens],
    }


def test_ciclo_vazio_entropia_zero():
    ciclo = run_cycle([], [], [], [], entropy=0.0, rng=random.Random(1))

    assert len(ciclo.result) == 7
    assert [len(r) for r in ciclo.result] == [4, 4, 4, 4, 4, 4, 3]

    assert len(ciclo.candidates) == 3
    for c in ciclo.candidates:
        assert len(c.sequence) == 4
        assert 99.85 <= c.confidence < 99.99

    adv = ciclo.advanced_predictions
    assert len(adv.hundreds) == 3
    assert len(adv.tens) == 3
    assert len(adv.elite_tens) == 2
    assert len(adv.super_tens) == 3
    assert all(len(p.value) == 3 and p.confidence == 99.98 for p in adv.hundreds)
    assert all(len(p.value) == 2 and p.confidence == 99.95 for p in adv.tens)
    assert [p.confidence for p in adv.elite_tens] == [99.99, 99.97]
    assert all(len(p.value) == 2 and p.confidence == 99.96 for p in adv.super_tens)


def test_sessao_espalha_os_primeiros_premios():
    ciclo = run_cycle([], [], [], [], entropy=0.0, rng=random.Random(1))

    assert ciclo.result[:3] == [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 0, 1]]


def test_entropia_zero_reproduzivel_com_qualquer_semente(dataset_basico):
    hits = [make_hit("1234", position=1)]
    a = run_cycle([dataset_basico], [], hits, [], entropy=0.0, rng=random.Random(1))
    b = run_cycle([dataset_basico], [], hits, [], entropy=0.0, rng=random.Random(2))

    assert _valores(a) == _valores(b)


def test_mesma_semente_mesmo_ciclo(dataset_basico):
    a = run_cycle([dataset_basico], [dataset_basico], [], [], entropy=0.9, rng=random.Random(7))
    b = run_cycle([dataset_basico], [dataset_basico], [], [], entropy=0.9, rng=random.Random(7))

    assert a.to_dict() == b.to_dict()


def test_historico_domina_primeiro_premio():
    noves = make_dataset(["9999"] * 6, "999")
    ciclo = run_cycle([], [noves] * 5, [], [], entropy=0.0, rng=random.Random(3))

    assert ciclo.result[0] == [9, 9, 9, 9]


def test_analise_combina_modulos_e_historico(dataset_basico):
    ciclo = run_cycle([dataset_basico], [dataset_basico, dataset_basico], [], [], entropy=0.5)

    ia = ciclo.analysis.input_analysis
    assert ia.total_digitos == 3 * sum(len(r) for r in dataset_basico)
    assert ciclo.analysis.historical_analysis["historical_digit_freq"] is ia.global_digit_freq


def test_to_dict_serializavel(dataset_basico):
    saida = run_cycle([dataset_basico], [], [], [], entropy=0.4).to_dict()

    assert set(saida) == {"result", "candidates", "advanced_predictions", "analysis"}
    assert set(saida["advanced_predictions"]) == {"hundreds", "tens", "elite_tens", "super_tens"}
    assert "sequence" in saida["candidates"][0]


@pytest.mark.parametrize("entropy", [0.0, 0.3, 1.0])
def test_todos_os_digitos_validos(dataset_basico, entropy):
    ciclo = run_cycle([dataset_basico], [], [], [], entropy=entropy)

    for row in ciclo.result:
        assert all(0 <= d <= 9 for d in row)
