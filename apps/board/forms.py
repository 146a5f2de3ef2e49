# apps/board/forms.py

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from django import forms
from django.core.exceptions import ValidationError

from .exceptions import TaskValidationError
from .store import TaskCategory, TaskPriority, TaskStatus


class StrictTitleField(forms.Field):
    """Título precisa ser uma string não vazia (sem conversão de tipos)"""

    def to_python(self, value):
        if not isinstance(value, str) or not value:
            raise ValidationError(self.error_messages['invalid'], code='invalid')
        return value


class StrictChoiceField(forms.Field):
    """
    Campo enumerado estrito

    Diferente do ChoiceField do Django, não converte o valor para string:
    None, '' ou qualquer valor fora das choices é rejeitado.
    """

    def __init__(self, *, choices, **kwargs):
        self.valid_values = [valor for valor, _ in choices]
        super().__init__(**kwargs)

    def to_python(self, value):
        if not isinstance(value, str) or value not in self.valid_values:
            raise ValidationError(self.error_messages['invalid'], code='invalid')
        return value


class DescriptionField(forms.Field):
    """Texto livre, sem validação de conteúdo; ausente ou None vira ''"""

    def to_python(self, value):
        if value is None:
            return ''
        return value if isinstance(value, str) else str(value)


class AttachmentListField(forms.Field):
    """Lista ordenada de referências opacas; o conteúdo não é inspecionado"""

    def to_python(self, value):
        if not isinstance(value, list):
            raise ValidationError(self.error_messages['invalid'], code='invalid')
        return list(value)

    def validate(self, value):
        # Lista vazia é válida
        pass


class TaskPayloadForm(forms.Form):
    """
    Validação do payload de uma tarefa

    A ordem de declaração dos campos define a ordem das verificações;
    o primeiro erro encontrado é o motivo reportado ao cliente.

    Modo parcial (update): o título só é exigido se vier no payload.
    Campos opcionais ausentes são removidos do form, portanto nunca
    aparecem em cleaned_data.
    """

    title = StrictTitleField(error_messages={
        'required': "Missing or invalid 'title'",
        'invalid': "Missing or invalid 'title'",
    })
    description = DescriptionField(required=False)
    status = StrictChoiceField(
        choices=TaskStatus.choices,
        required=False,
        error_messages={'invalid': "Invalid 'status'"},
    )
    priority = StrictChoiceField(
        choices=TaskPriority.choices,
        required=False,
        error_messages={'invalid': "Invalid 'priority'"},
    )
    category = StrictChoiceField(
        choices=TaskCategory.choices,
        required=False,
        error_messages={'invalid': "Invalid 'category'"},
    )
    attachments = AttachmentListField(
        required=False,
        error_messages={'invalid': "Invalid 'attachments'"},
    )

    def __init__(self, data, partial=False):
        super().__init__(data=data)
        self.partial = partial

        for nome in list(self.fields):
            if nome in data:
                continue
            if nome == 'title' and not partial:
                continue
            del self.fields[nome]

    def first_error(self) -> Optional[str]:
        """Primeira mensagem de erro, seguindo a ordem dos campos"""
        for nome in self.fields:
            if nome in self.errors:
                return self.errors[nome][0]
        return None


def validate_task_payload(payload, partial=False) -> Optional[str]:
    """
    Retorna None se o payload é válido, ou o motivo da rejeição

    Função pura: não altera o payload nem o store.
    """
    if not isinstance(payload, dict):
        return 'Invalid payload'

    form = TaskPayloadForm(payload, partial=partial)
    if form.is_valid():
        return None
    return form.first_error()


# === Requests tipados (um por evento) ===

@dataclass
class CreateTaskRequest:
    title: str
    description: str = ''
    status: str = TaskStatus.TODO.value
    priority: str = TaskPriority.MEDIUM.value
    category: str = TaskCategory.FEATURE.value
    attachments: list = field(default_factory=list)


@dataclass
class UpdateTaskRequest:
    task_id: str
    changes: Dict = field(default_factory=dict)


@dataclass
class MoveTaskRequest:
    task_id: str
    status: str


@dataclass
class DeleteTaskRequest:
    task_id: str


TaskRequest = Union[CreateTaskRequest, UpdateTaskRequest, MoveTaskRequest, DeleteTaskRequest]


def _payload_id(payload):
    if not isinstance(payload, dict):
        return None
    return payload.get('id') or None


def _parse_create(payload) -> CreateTaskRequest:
    if not isinstance(payload, dict):
        raise TaskValidationError('task:create validation failed: Invalid payload')

    form = TaskPayloadForm(payload)
    if not form.is_valid():
        raise TaskValidationError(f'task:create validation failed: {form.first_error()}')
    dados = form.cleaned_data

    return CreateTaskRequest(
        title=dados['title'],
        description=dados.get('description') or '',
        status=dados.get('status', TaskStatus.TODO.value),
        priority=dados.get('priority', TaskPriority.MEDIUM.value),
        category=dados.get('category', TaskCategory.FEATURE.value),
        attachments=dados.get('attachments', []),
    )


def _parse_update(payload) -> UpdateTaskRequest:
    task_id = _payload_id(payload)
    if task_id is None:
        raise TaskValidationError("task:update requires 'id'")

    form = TaskPayloadForm(payload, partial=True)
    if not form.is_valid():
        raise TaskValidationError(f'task:update validation failed: {form.first_error()}')

    return UpdateTaskRequest(task_id=task_id, changes=dict(form.cleaned_data))


def _parse_move(payload) -> MoveTaskRequest:
    task_id = _payload_id(payload)
    status = payload.get('status') if isinstance(payload, dict) else None
    if task_id is None or not status:
        raise TaskValidationError("task:move requires 'id' and 'status'")

    if not isinstance(status, str) or status not in TaskStatus.values:
        raise TaskValidationError(f"Invalid status '{status}'")

    return MoveTaskRequest(task_id=task_id, status=status)


def _parse_delete(payload) -> DeleteTaskRequest:
    task_id = _payload_id(payload)
    if task_id is None:
        raise TaskValidationError("task:delete requires 'id'")
    return DeleteTaskRequest(task_id=task_id)


REQUEST_PARSERS = {
    'task:create': _parse_create,
    'task:update': _parse_update,
    'task:move': _parse_move,
    'task:delete': _parse_delete,
}


def parse_request(event: str, payload) -> TaskRequest:
    """
    Converte (evento, payload) em um request tipado

    Levanta TaskValidationError com a mensagem que vai para o cliente.
    """
    parser = REQUEST_PARSERS.get(event)
    if parser is None:
        raise TaskValidationError(f"Unknown event '{event}'")
    return parser(payload)
