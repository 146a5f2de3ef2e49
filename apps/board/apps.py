# apps/board/apps.py

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class BoardConfig(AppConfig):
    """Configuração da app Board"""

    name = 'apps.board'
    verbose_name = 'Board - Kanban'

    def ready(self):
        """
        Inicialização da app
        Cria o serviço de sincronização (e o store vazio) do processo
        """
        from .sync import TaskSyncService

        self.sync_service = TaskSyncService()

        logger.info("🔌 Board App inicializada - WebSockets habilitados")
