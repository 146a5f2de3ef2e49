# apps/board/sync.py

import logging
from typing import Dict, List, Optional

from .exceptions import TaskNotFound
from .forms import (
    CreateTaskRequest,
    DeleteTaskRequest,
    MoveTaskRequest,
    UpdateTaskRequest,
    parse_request,
)
from .store import Task, TaskCategory, TaskPriority, TaskStatus, TaskStore, generate_id

logger = logging.getLogger(__name__)


class TaskSyncService:
    """
    Serviço de sincronização do board

    Único dono do TaskStore. Toda mutação passa pela validação
    (parse_request) antes de tocar no store; os métodos são síncronos,
    então cada request é aplicado por inteiro antes do próximo.

    O fan-out do snapshot fica a cargo do consumer WebSocket.
    """

    def __init__(self, store: Optional[TaskStore] = None):
        self.store = store if store is not None else TaskStore()

    # === Operações ===

    def create(self, request: CreateTaskRequest) -> Task:
        task = Task(
            id=self._novo_id(),
            title=request.title,
            description=request.description,
            status=request.status,
            priority=request.priority,
            category=request.category,
            attachments=list(request.attachments),
        )
        self.store.insert(task)
        logger.debug(f"📝 Tarefa criada: {task.id}")
        return task

    def update(self, request: UpdateTaskRequest) -> Task:
        task = self.store.update(request.task_id, request.changes)
        if task is None:
            raise TaskNotFound(request.task_id)
        logger.debug(f"✏️ Tarefa atualizada: {task.id} ({', '.join(request.changes) or 'sem campos'})")
        return task

    def move(self, request: MoveTaskRequest) -> Task:
        task = self.store.update(request.task_id, {'status': request.status})
        if task is None:
            raise TaskNotFound(request.task_id)
        logger.debug(f"➡️ Tarefa {task.id} movida para {task.status}")
        return task

    def delete(self, request: DeleteTaskRequest) -> Task:
        task = self.store.remove(request.task_id)
        if task is None:
            raise TaskNotFound(request.task_id)
        logger.debug(f"🗑️ Tarefa removida: {task.id}")
        return task

    def handle(self, event: str, payload) -> Task:
        """
        Valida e aplica um evento vindo do cliente

        Levanta TaskValidationError / TaskNotFound sem alterar o store.
        """
        request = parse_request(event, payload)

        if isinstance(request, CreateTaskRequest):
            return self.create(request)
        if isinstance(request, UpdateTaskRequest):
            return self.update(request)
        if isinstance(request, MoveTaskRequest):
            return self.move(request)
        return self.delete(request)

    # === Leitura ===

    def snapshot(self) -> List[Dict]:
        return self.store.snapshot()

    def summary(self) -> Dict:
        """
        Contagem de tarefas por coluna, prioridade e categoria

        Mesmos dados usados pelo gráfico de progresso do frontend.
        """
        tasks = list(self.store)
        total = len(tasks)

        def contar(atributo, choices):
            return {valor: sum(1 for t in tasks if getattr(t, atributo) == valor) for valor in choices.values}

        por_status = contar('status', TaskStatus)
        concluidas = por_status[TaskStatus.DONE.value]

        return {
            'total': total,
            'status': por_status,
            'priority': contar('priority', TaskPriority),
            'category': contar('category', TaskCategory),
            'completion': round(concluidas * 100 / total, 1) if total else 0.0,
        }

    def _novo_id(self) -> str:
        task_id = generate_id()
        while self.store.find_index(task_id) is not None:
            task_id = generate_id()
        return task_id
