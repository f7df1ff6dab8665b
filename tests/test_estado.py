"""
tests/test_estado.py

Resposta padrão das rotas montada sobre o snapshot já mutado
"""

import asyncio
from types import SimpleNamespace

import pytest

from core.painel import Operacao
from core.store import EstadoInvalidoError
from helpers.estado import aplicar_operacao


def _request(store):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(store=store)))


def test_resposta_usa_estado_novo(store_factory):
    async def cenario():
        store = store_factory()
        estado = await store.carregar()
        op = Operacao(mutacoes={"settings": {"entropy": 0.3, "voice_enabled": True}}, mensagem="ok")
        resposta = await aplicar_operacao(_request(store), estado, op)
        return resposta, await store.carregar()

    resposta, gravado = asyncio.run(cenario())

    assert resposta["voice_enabled"] is True
    assert resposta["mensagem"] == "ok"
    assert gravado.settings == {"entropy": 0.3, "voice_enabled": True}


def test_mutacao_invalida_nao_grava(store_factory):
    async def cenario():
        store = store_factory()
        estado = await store.carregar()
        with pytest.raises(EstadoInvalidoError):
            await aplicar_operacao(_request(store), estado, Operacao(mutacoes={"locked": True, "senha": "x"}))
        return await store.client.get(store.key("locked"))

    assert asyncio.run(cenario()) is None
