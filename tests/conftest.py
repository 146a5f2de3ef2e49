"""Fixtures compartilhadas dos testes do board."""

import pytest
from channels.layers import channel_layers
from django.apps import apps

from apps.board.consumers import TaskBoardConsumer
from apps.board.store import TaskStore
from apps.board.sync import TaskSyncService


@pytest.fixture(autouse=True)
def channel_layer_limpo():
    """Cada teste recebe um InMemoryChannelLayer novo (grupos vazios)."""
    channel_layers.backends = {}
    yield
    channel_layers.backends = {}


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def service(store):
    return TaskSyncService(store=store)


@pytest.fixture
def board_app(service):
    """Aplicação ASGI do consumer ligada ao serviço do teste."""
    return TaskBoardConsumer.as_asgi(service=service)


@pytest.fixture
def app_service():
    """Serviço criado no ready() da app board, esvaziado ao final."""
    service = apps.get_app_config('board').sync_service
    service.store.clear()
    yield service
    service.store.clear()
