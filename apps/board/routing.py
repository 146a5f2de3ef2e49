# apps/board/routing.py

from django.apps import apps
from django.urls import re_path

from . import consumers


def build_websocket_urlpatterns(service):
    """Rotas WebSocket ligadas a uma instância do serviço de sincronização"""
    consumer = consumers.TaskBoardConsumer.as_asgi(service=service)

    return [
        # Board compartilhado - atualizações em tempo real
        re_path(r'^ws/tasks/$', consumer),

        # Mesmo board em um segundo caminho
        re_path(r'^ws/board/$', consumer),
    ]


# Rotas WebSocket para a aplicação board
websocket_urlpatterns = build_websocket_urlpatterns(
    apps.get_app_config('board').sync_service
)
