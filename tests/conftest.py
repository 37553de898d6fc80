"""
Shared fixtures.

Every fixture is wired to a FakeEngine (see tests/fakes.py) so no real
model is ever loaded.
"""

from __future__ import annotations

import pytest

from anuvad.config import Settings
from anuvad.engine.loader import ModelLoader
from anuvad.i18n.translator import Translator
from anuvad.runtime import create_runtime
from tests.fakes import FakeEngine


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def loader(engine):
    return ModelLoader([engine])


@pytest.fixture
def translator(loader):
    return Translator(loader)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def runtime(settings, engine):
    return create_runtime(settings, engines=[engine])


@pytest.fixture
def session(runtime):
    return runtime.session("te")
