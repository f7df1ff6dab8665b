"""
tests/test_store.py

EstadoStore sobre FakeRedis
"""

import asyncio

import pytest

from core.records import novo_acerto, nova_retificacao
from core.store import EstadoInvalidoError


def test_padroes_quando_vazio(store_factory):
    async def cenario():
        store = store_factory()
        return await store.carregar()

    estado = asyncio.run(cenario())

    assert estado.history == []
    assert estado.hits == []
    assert estado.m3 == [""] * 7
    assert estado.m3_history == [[""] * 7]
    assert estado.settings == {"entropy": 0.0, "voice_enabled": False}
    assert estado.last_res is None
    assert estado.locked is False


def test_grava_e_le_registros(store_factory):
    acerto = novo_acerto("1234", "Milhar", 1)
    ajuste = nova_retificacao("1234", "4321", "Milhar", "1º PRÊMIO")

    async def cenario():
        store = store_factory()
        await store.aplicar({
            "hits": [acerto],
            "rect": [ajuste],
            "m3": ["1234"] * 7,
            "m3_idx": 2,
            "locked": True,
            "history": [[[1, 2, 3, 4]]],
        })
        return await store.carregar()

    estado = asyncio.run(cenario())

    assert estado.hits == [acerto]
    assert estado.rect == [ajuste]
    assert estado.m3 == ["1234"] * 7
    assert estado.m3_history == [["1234"] * 7]
    assert estado.m3_idx == 2
    assert estado.locked is True
    assert estado.history == [[[1, 2, 3, 4]]]


def test_chaves_com_prefixo(store_factory):
    async def cenario():
        store = store_factory(prefix="dh_v25")
        await store.aplicar({"locked": True})
        return await store.client.get("dh_v25_locked")

    assert asyncio.run(cenario()) == "true"


def test_json_corrompido(store_factory):
    async def cenario():
        store = store_factory()
        await store.client.set(store.key("hits"), "{nao json")
        await store.carregar()

    with pytest.raises(EstadoInvalidoError):
        asyncio.run(cenario())


def test_mutacao_desconhecida(store_factory):
    async def cenario():
        await store_factory().aplicar({"senha": "x"})

    with pytest.raises(EstadoInvalidoError):
        asyncio.run(cenario())
