# apps/board/views.py

from django.apps import apps
from django.http import JsonResponse
from django.views.decorators.http import require_GET


def get_sync_service():
    """Serviço de sincronização criado no ready() da app board"""
    return apps.get_app_config('board').sync_service


@require_GET
def health(request):
    """Liveness"""
    return JsonResponse({'status': 'ok'})


@require_GET
def task_list(request):
    """
    Snapshot do board via HTTP (somente leitura)
    Mesmo conteúdo enviado no evento sync:tasks
    """
    return JsonResponse({'tasks': get_sync_service().snapshot()})


@require_GET
def task_summary(request):
    """
    API JSON para o gráfico de progresso
    Contagem por coluna, prioridade e categoria
    """
    return JsonResponse(get_sync_service().summary())
