# config/settings/development.py

from .base import *

# === DESENVOLVIMENTO ===

DEBUG = True

ALLOWED_HOSTS = env('ALLOWED_HOSTS', default=['localhost', '127.0.0.1', '0.0.0.0'])

# === LOGGING MAIS VERBOSO ===

LOGGING['handlers']['console']['level'] = 'DEBUG'
LOGGING['root']['level'] = 'DEBUG'
LOGGING['loggers']['apps']['level'] = 'DEBUG'

# === SHELL PLUS ===

SHELL_PLUS_IMPORTS = [
    'from apps.board.store import *',
    'from apps.board.forms import parse_request, validate_task_payload',
    'from django.apps import apps',
]

print("🚀 Configurações de DESENVOLVIMENTO carregadas")
print(f"🔑 DEBUG: {DEBUG}")
print(f"🌐 Porta padrão: {PORT}")
print(f"🔒 Origens permitidas: {', '.join(BOARD_ALLOWED_ORIGINS)}")
