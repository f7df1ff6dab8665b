"""
tests/conftest.py

Fixtures compartilhadas
"""

import random

import fakeredis
import pytest
from fakeredis import aioredis

from core.records import HitRecord
from core.store import EstadoStore


def make_dataset(milhares, centena):
    """['1234', ...] x6 + '123' -> DataSet numérico"""
    return [[int(c) for c in m] for m in milhares] + [[int(c) for c in centena]]


def make_hit(value, position=1, status="Acerto", type="Milhar"):
    return HitRecord(
        id=f"hit-{value}-{position}",
        value=value,
        type=type,
        position=position,
        status=status,
        timestamp=0,
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def dataset_basico():
    return make_dataset(
        ["1234", "5678", "9012", "3456", "7890", "1111"],
        "234",
    )


@pytest.fixture
def store_factory():
    """Cria um EstadoStore sobre um FakeRedis isolado"""
    def _factory(prefix="teste"):
        client = aioredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
        return EstadoStore(client, prefix=prefix, default_settings={"entropy": 0.0, "voice_enabled": False})
    return _factory
