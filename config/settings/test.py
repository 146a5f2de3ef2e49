# config/settings/test.py

from .base import *

# === TESTES ===

DEBUG = False

ALLOWED_HOSTS = ['*']

SECRET_KEY = 'test-secret-key'

CHANNEL_LAYERS = {
    'default': {
        'BACKEND': 'channels.layers.InMemoryChannelLayer',
    },
}

# Desabilitar logs em testes
LOGGING['handlers'] = {}
LOGGING['root']['handlers'] = []
LOGGING['loggers'] = {}
