# apps/board/store.py

import copy
import secrets
import time
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from django.db import models


class TaskStatus(models.TextChoices):
    """Colunas do Kanban"""

    TODO = 'todo', 'To Do'
    INPROGRESS = 'inprogress', 'In Progress'
    DONE = 'done', 'Done'


class TaskPriority(models.TextChoices):
    LOW = 'Low', 'Low'
    MEDIUM = 'Medium', 'Medium'
    HIGH = 'High', 'High'


class TaskCategory(models.TextChoices):
    BUG = 'Bug', 'Bug'
    FEATURE = 'Feature', 'Feature'
    ENHANCEMENT = 'Enhancement', 'Enhancement'


# Campos que podem ser alterados depois da criação (o id nunca muda)
MUTABLE_FIELDS = ('title', 'description', 'status', 'priority', 'category', 'attachments')

_BASE36 = '0123456789abcdefghijklmnopqrstuvwxyz'


def _to_base36(numero: int) -> str:
    if numero == 0:
        return '0'
    digitos = []
    while numero:
        numero, resto = divmod(numero, 36)
        digitos.append(_BASE36[resto])
    return ''.join(reversed(digitos))


def generate_id() -> str:
    """
    Gera um id opaco para uma tarefa

    Combina o timestamp em milissegundos (base 36) com entropia aleatória,
    tornando colisões praticamente impossíveis durante a vida do processo.
    """
    timestamp = _to_base36(int(time.time() * 1000))
    return f"{timestamp}-{secrets.token_hex(4)}"


@dataclass
class Task:
    """Registro de tarefa mantido em memória"""

    id: str
    title: str
    description: str = ''
    status: str = TaskStatus.TODO.value
    priority: str = TaskPriority.MEDIUM.value
    category: str = TaskCategory.FEATURE.value
    attachments: list = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Formato enviado pelo WebSocket (cópia independente do registro)"""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'status': self.status,
            'priority': self.priority,
            'category': self.category,
            'attachments': copy.deepcopy(self.attachments),
        }


class TaskStore:
    """
    Sequência ordenada de tarefas em memória

    Sem persistência: o conteúdo é perdido quando o processo termina.
    A busca por id é linear, suficiente para o volume de um board.
    """

    def __init__(self, tasks: Optional[List[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    def __len__(self):
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def insert(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def find_index(self, task_id) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def get(self, task_id) -> Optional[Task]:
        index = self.find_index(task_id)
        return None if index is None else self._tasks[index]

    def update(self, task_id, fields: Dict) -> Optional[Task]:
        """
        Aplica um merge parcial no registro

        Apenas MUTABLE_FIELDS são considerados; campos ausentes
        continuam com o valor anterior.
        """
        task = self.get(task_id)
        if task is None:
            return None

        for nome in MUTABLE_FIELDS:
            if nome in fields:
                setattr(task, nome, fields[nome])
        return task

    def remove(self, task_id) -> Optional[Task]:
        index = self.find_index(task_id)
        if index is None:
            return None
        return self._tasks.pop(index)

    def clear(self):
        self._tasks.clear()

    def snapshot(self) -> List[Dict]:
        """Estado completo do board, na ordem de inserção"""
        return [task.to_dict() for task in self._tasks]
