"""
tests/test_api.py

Rotas HTTP com o estado em FakeRedis
"""

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app

TEXTO_M3 = "1234\n5678\n9012\n3456\n7890\n1111\n234"


@pytest.fixture
def client(store_factory):
    settings = Settings(ENVIRONMENT="test", DEFAULT_ENTROPY=0.0)
    app = create_app(settings=settings, store=store_factory())
    with TestClient(app) as c:
        yield c


def test_root_e_ping(client):
    assert client.get("/").json()["status"] == "online"
    assert client.get("/ping").json()["message"] == "pong"
    assert client.get("/health").json()["status"] == "healthy"


def test_fluxo_gerar_colar_gerar(client):
    r = client.post("/api/modulos/m3/colar", json={"texto": TEXTO_M3})
    assert r.status_code == 200
    assert r.json()["m3"][0] == "1234"

    r = client.post("/api/geracao")
    assert r.status_code == 200
    corpo = r.json()
    assert [len(row) for row in corpo["result"]] == [4, 4, 4, 4, 4, 4, 3]
    assert len(corpo["candidates"]) == 3
    assert len(corpo["advanced_predictions"]["elite_tens"]) == 2
    # M1 e M2 ainda vazios
    assert corpo["errors"] == ["Vetor 1 instável.", "Vetor 2 instável."]

    # travado até um novo resultado
    assert client.post("/api/geracao").status_code == 409

    ultima = client.get("/api/geracao/ultima").json()
    assert ultima["locked"] is True
    assert ultima["result"] == corpo["result"]

    r = client.post("/api/modulos/m3/colar", json={"valores": ["9999"] * 6 + ["999"]})
    assert r.status_code == 200

    modulos = client.get("/api/modulos").json()
    assert modulos["m2"][0] == "1234"
    assert modulos["locked"] is False

    rects = client.get("/api/historico/retificacoes").json()
    assert rects["total"] == 7

    entradas = client.get("/api/historico/entradas").json()
    assert entradas["total"] == 2
    assert entradas["itens"][0][0] == [9, 9, 9, 9]

    assert client.post("/api/geracao").status_code == 200


def test_colar_sem_dados(client):
    assert client.post("/api/modulos/m3/colar", json={}).status_code == 400


def test_navegacao_m3(client):
    client.post("/api/modulos/m3/colar", json={"valores": ["1111"] * 7})
    client.post("/api/modulos/m3/colar", json={"valores": ["2222"] * 7})

    assert client.post("/api/modulos/m3/desfazer").json()["m3"][0] == "1111"
    assert client.post("/api/modulos/m3/refazer").json()["m3"][0] == "2222"

    limpo = client.post("/api/modulos/m3/limpar").json()
    assert limpo["m3"] == [""] * 7
    assert limpo["mensagem"] == "Memória limpa."

    editado = client.put("/api/modulos/m3", json={"valores": ["12a34"] + [""] * 6}).json()
    assert editado["m3"][0] == "1234"


def test_acertos_manual(client):
    r = client.post("/api/historico/acertos", json={"value": "12", "type": "Dezena", "position": 2})
    assert r.status_code == 200
    assert r.json()["status"] == "Acerto"

    r = client.post(
        "/api/historico/acertos",
        json={"value": "123", "type": "Centena", "position": 7, "status": "Quase Acerto"},
    )
    assert r.json()["status"] == "Quase Acerto"

    acertos = client.get("/api/historico/acertos").json()
    assert acertos["total"] == 2
    assert acertos["itens"][0]["value"] == "123"

    assert client.delete("/api/historico/acertos/0").json()["total"] == 1
    assert client.delete("/api/historico/acertos/5").status_code == 404
    assert client.delete("/api/historico/acertos").json()["total"] == 0


def test_acerto_tipo_invalido(client):
    r = client.post("/api/historico/acertos", json={"value": "12", "type": "Dupla", "position": 1})
    assert r.status_code == 400


def test_retificacao_manual(client):
    r = client.post(
        "/api/historico/retificacoes",
        json={"generated": "1234", "actual": "1243", "type": "Milhar", "rank_label": "1º PRÊMIO"},
    )
    assert r.status_code == 200
    assert client.get("/api/historico/retificacoes").json()["itens"][0]["actual"] == "1243"


def test_historico_desconhecido(client):
    assert client.get("/api/historico/sorteios").status_code == 404


def test_configuracoes(client):
    assert client.get("/api/configuracoes").json() == {"entropy": 0.0, "voice_enabled": False}

    r = client.put("/api/configuracoes", json={"entropy": 0.75})
    assert r.json()["entropy"] == 0.75
    assert client.get("/api/configuracoes").json()["entropy"] == 0.75

    assert client.put("/api/configuracoes", json={"entropy": 2}).status_code == 422


@pytest.mark.parametrize("texto", ["", "  \n \r\n"])
def test_colar_texto_vazio_nao_mexe_no_estado(client, texto):
    client.post("/api/modulos/m3/colar", json={"texto": TEXTO_M3})
    client.post("/api/geracao")

    assert client.post("/api/modulos/m3/colar", json={"texto": texto}).status_code == 400

    modulos = client.get("/api/modulos").json()
    assert modulos["m2"] == [""] * 7
    assert modulos["m3"][0] == "1234"
    assert modulos["locked"] is True
    assert client.get("/api/historico/entradas").json()["total"] == 1


def test_colar_valores_vazios(client):
    assert client.post("/api/modulos/m3/colar", json={"valores": [""] * 7}).status_code == 400
    assert client.get("/api/historico/entradas").json()["total"] == 0


def test_colar_valores_cortados(client):
    r = client.post("/api/modulos/m3/colar", json={"valores": ["123456789"] * 7})
    assert r.json()["m3"] == ["1234"] * 6 + ["123"]

    entradas = client.get("/api/historico/entradas").json()
    assert entradas["itens"][0] == [[1, 2, 3, 4]] * 6 + [[1, 2, 3]]


@pytest.mark.parametrize("position", [0, -1, 8])
def test_acerto_posicao_fora_da_matriz(client, position):
    r = client.post("/api/historico/acertos", json={"value": "12", "type": "Dezena", "position": position})
    assert r.status_code == 422
