# apps/board/consumers.py

import json
import logging

from channels.generic.websocket import AsyncWebsocketConsumer
from django.conf import settings
from django.utils import timezone

from .exceptions import BoardError

logger = logging.getLogger(__name__)

BOARD_GROUP_NAME = 'tasks'


class TaskBoardConsumer(AsyncWebsocketConsumer):
    """
    Consumer WebSocket do board Kanban

    Protocolo (frames JSON):
    - cliente -> servidor: {"type": "task:create", "payload": {...}, "ack": 1}
    - servidor -> cliente: {"type": "sync:tasks", "payload": [...]}
    - resposta a um request com ack: {"type": "ack", "ack": 1, "payload": {...}}
    - erro sem ack: {"type": "error", "payload": {"message": "..."}}

    Toda mutação bem sucedida gera exatamente um broadcast com o snapshot
    completo para o grupo (inclusive para quem fez o request).
    """

    def __init__(self, *args, service=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    async def connect(self):
        """
        Entra no grupo do board e envia o estado atual só para esta conexão
        """
        self.board_group_name = BOARD_GROUP_NAME

        await self.channel_layer.group_add(
            self.board_group_name,
            self.channel_name
        )

        await self.accept()

        await self.send_json({
            'type': 'sync:tasks',
            'payload': self.service.snapshot(),
        })

        logger.info(f"✅ WebSocket conectado - {self.channel_name}")

    async def disconnect(self, close_code):
        if hasattr(self, 'board_group_name'):
            await self.channel_layer.group_discard(
                self.board_group_name,
                self.channel_name
            )

        logger.info(f"🔌 WebSocket desconectado - {self.channel_name} (code={close_code})")

    async def receive(self, text_data=None, bytes_data=None):
        """
        Recebe mensagens do cliente WebSocket
        Processa heartbeat, pedidos de sincronização e mutações
        """
        try:
            data = json.loads(text_data)
        except (TypeError, ValueError):
            logger.error(f"❌ JSON inválido recebido via WebSocket de {self.channel_name}")
            await self.send_error('Invalid message')
            return

        if not isinstance(data, dict):
            logger.error(f"❌ Frame sem envelope recebido de {self.channel_name}")
            await self.send_error('Invalid message')
            return

        message_type = data.get('type')
        ack = data.get('ack')

        # Heartbeat/Ping
        if message_type == 'ping':
            await self.send_json({
                'type': 'pong',
                'payload': {
                    'timestamp': self.get_timestamp(),
                    'interval': settings.BOARD_WS_HEARTBEAT_INTERVAL,
                },
            })
            return

        # Reenvio do snapshot apenas para quem pediu
        if message_type == 'sync:request':
            await self.send_json({
                'type': 'sync:tasks',
                'payload': self.service.snapshot(),
            })
            return

        await self.handle_mutation(message_type, data.get('payload'), ack)

    async def handle_mutation(self, event, payload, ack=None):
        """
        Valida, aplica, faz broadcast e responde

        Nenhum await entre a validação e a mutação: o request é aplicado
        por inteiro antes de qualquer outro ser processado.
        """
        try:
            task = self.service.handle(event, payload)
            snapshot = self.service.snapshot()
            result = {'status': 'ok', 'task': task.to_dict()}
        except BoardError as e:
            logger.warning(f"⚠️ {event} rejeitado para {self.channel_name}: {e.message}")
            await self.reply_error(e.message, ack)
            return
        except Exception as e:
            message = f'{event} failed: {e}'
            logger.exception(f"❌ {message}")
            await self.reply_error(message, ack)
            return

        await self.broadcast_snapshot(snapshot)
        await self.reply(ack, result)

    # === Entrega de respostas ===

    async def reply(self, ack, result):
        if ack is None:
            return
        await self.send_json({
            'type': 'ack',
            'ack': ack,
            'payload': result,
        })

    async def reply_error(self, message, ack=None):
        """
        Com ack o erro vai só pela resposta do request;
        sem ack vira um evento 'error' para esta conexão
        """
        if ack is not None:
            await self.reply(ack, {'status': 'error', 'message': message})
        else:
            await self.send_error(message)

    async def send_error(self, message):
        await self.send_json({
            'type': 'error',
            'payload': {'message': message},
        })

    async def broadcast_snapshot(self, snapshot):
        # Best-effort: o channel layer descarta mensagens para canais cheios
        await self.channel_layer.group_send(
            self.board_group_name,
            {
                'type': 'tasks_sync',
                'tasks': snapshot,
            }
        )

    # === Handlers de eventos do grupo ===

    async def tasks_sync(self, event):
        """
        Repassa o snapshot completo para o cliente
        """
        await self.send_json({
            'type': 'sync:tasks',
            'payload': event['tasks'],
        })

    # === Métodos auxiliares ===

    async def send_json(self, content):
        await self.send(text_data=json.dumps(content))

    def get_timestamp(self):
        """
        Retorna timestamp atual em formato ISO
        """
        return timezone.now().isoformat()
