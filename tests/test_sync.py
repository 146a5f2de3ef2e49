"""Serviço de sincronização: mutações validadas sobre o store."""

import pytest

from apps.board.exceptions import TaskNotFound, TaskValidationError


def test_create_aplica_defaults(service):
    task = service.handle('task:create', {'title': 'Task One'})

    assert task.to_dict() == {
        'id': task.id,
        'title': 'Task One',
        'description': '',
        'status': 'todo',
        'priority': 'Medium',
        'category': 'Feature',
        'attachments': [],
    }
    assert len(service.store) == 1


def test_create_gera_ids_unicos(service):
    ids = [service.handle('task:create', {'title': f'T{i}'}).id for i in range(50)]

    assert len(set(ids)) == 50
    assert len(service.store) == 50


def test_create_copia_attachments(service):
    attachments = [{'name': 'a.png'}]
    task = service.handle('task:create', {'title': 'T', 'attachments': attachments})

    attachments.append({'name': 'b.png'})

    assert task.attachments == [{'name': 'a.png'}]


def test_create_invalido_nao_altera_store(service):
    with pytest.raises(TaskValidationError):
        service.handle('task:create', {'title': 'T', 'status': 'bogus'})
    assert service.snapshot() == []


def test_update_merge_parcial(service):
    task = service.handle('task:create', {'title': 'T', 'description': 'd', 'priority': 'High'})

    atualizada = service.handle('task:update', {'id': task.id, 'category': 'Bug', 'unknown': 1})

    assert atualizada.category == 'Bug'
    assert atualizada.title == 'T'
    assert atualizada.description == 'd'
    assert atualizada.priority == 'High'


def test_update_sem_campos_nao_muda_nada(service):
    task = service.handle('task:create', {'title': 'T'})
    antes = service.snapshot()

    service.handle('task:update', {'id': task.id})

    assert service.snapshot() == antes


def test_update_id_inexistente(service):
    with pytest.raises(TaskNotFound) as exc:
        service.handle('task:update', {'id': 'nope', 'title': 'T'})
    assert exc.value.message == 'task with id nope not found'
    assert exc.value.task_id == 'nope'


def test_move_altera_so_status(service):
    task = service.handle('task:create', {'title': 'T', 'priority': 'Low'})

    movida = service.handle('task:move', {'id': task.id, 'status': 'inprogress', 'title': 'ignorado'})

    assert movida.status == 'inprogress'
    assert movida.title == 'T'
    assert movida.priority == 'Low'


def test_move_invalido_nao_altera_store(service):
    task = service.handle('task:create', {'title': 'T'})
    antes = service.snapshot()

    with pytest.raises(TaskValidationError):
        service.handle('task:move', {'id': task.id, 'status': 'archived'})

    assert service.snapshot() == antes


def test_move_id_inexistente(service):
    with pytest.raises(TaskNotFound) as exc:
        service.handle('task:move', {'id': 'nonexistent', 'status': 'done'})
    assert str(exc.value) == 'task with id nonexistent not found'


def test_delete_remove_e_retorna(service):
    primeira = service.handle('task:create', {'title': 'A'})
    segunda = service.handle('task:create', {'title': 'B'})

    removida = service.handle('task:delete', {'id': primeira.id})

    assert removida.id == primeira.id
    assert [t['id'] for t in service.snapshot()] == [segunda.id]


def test_delete_id_inexistente(service):
    service.handle('task:create', {'title': 'A'})

    with pytest.raises(TaskNotFound):
        service.handle('task:delete', {'id': 'nope'})
    assert len(service.store) == 1


def test_ultima_escrita_vence(service):
    task = service.handle('task:create', {'title': 'Original'})

    service.handle('task:update', {'id': task.id, 'title': 'Cliente A'})
    service.handle('task:update', {'id': task.id, 'title': 'Cliente B'})

    assert service.snapshot()[0]['title'] == 'Cliente B'


def test_servicos_nao_compartilham_store(service):
    from apps.board.sync import TaskSyncService

    outro = TaskSyncService()
    service.handle('task:create', {'title': 'T'})

    assert outro.snapshot() == []


def test_summary(service):
    service.handle('task:create', {'title': 'A', 'status': 'done', 'category': 'Bug'})
    service.handle('task:create', {'title': 'B', 'status': 'inprogress', 'priority': 'High'})
    service.handle('task:create', {'title': 'C'})
    service.handle('task:create', {'title': 'D', 'status': 'done'})

    summary = service.summary()

    assert summary['total'] == 4
    assert summary['status'] == {'todo': 1, 'inprogress': 1, 'done': 2}
    assert summary['priority'] == {'Low': 0, 'Medium': 3, 'High': 1}
    assert summary['category'] == {'Bug': 1, 'Feature': 3, 'Enhancement': 0}
    assert summary['completion'] == 50.0


def test_summary_board_vazio(service):
    summary = service.summary()

    assert summary['total'] == 0
    assert summary['completion'] == 0.0
