"""
Fixtures partagées: les trois séances de référence + une séance générique.
"""
from datetime import timedelta

import pytest

from training_calc.domain.training import LEN_STEP, Running, Swimming, Training, Walking


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Un .env local ne doit pas influencer les tests."""
    monkeypatch.delenv("TRAINING_LOCALE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def swimming():
    return Swimming.create(
        training_type="Плавание",
        action=2000,
        duration=timedelta(minutes=90),
        weight=85,
        length_pool=50,
        count_pool=5,
    )


@pytest.fixture
def walking():
    return Walking(
        training=Training(
            training_type="Ходьба",
            action=20000,
            len_step=LEN_STEP,
            duration=timedelta(hours=3, minutes=45),
            weight=85,
        ),
        height=185,
    )


@pytest.fixture
def running():
    return Running(
        training=Training(
            training_type="Бег",
            action=5000,
            len_step=LEN_STEP,
            duration=timedelta(minutes=30),
            weight=85,
        ),
    )


@pytest.fixture
def base_training():
    return Training(
        training_type="Йога",
        action=1200,
        len_step=LEN_STEP,
        duration=timedelta(hours=1),
        weight=70,
    )
