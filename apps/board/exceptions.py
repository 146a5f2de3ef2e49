# apps/board/exceptions.py


class BoardError(Exception):
    """Erro base do protocolo de sincronização do board"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TaskValidationError(BoardError):
    """Payload com formato inválido ou campo enumerado fora do domínio"""


class TaskNotFound(BoardError):
    """Operação sobre um id que não existe no store"""

    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f'task with id {task_id} not found')
