# config/settings/base.py

import environ
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Configuração do django-environ
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, ['*']),
    CORS_ORIGIN=(list, ['*']),
    PORT=(int, 5000),
)

# Lê o arquivo .env se existir
environ.Env.read_env(BASE_DIR / '.env')

# === CONFIGURAÇÕES BÁSICAS ===

SECRET_KEY = env('SECRET_KEY', default='django-insecure-CHANGE-ME-IN-PRODUCTION')

DEBUG = env('DEBUG')

ALLOWED_HOSTS = env('ALLOWED_HOSTS')

# Porta padrão do servidor (manage.py runserver sem endereço)
PORT = env('PORT')

# === APLICAÇÕES ===

DJANGO_APPS = [
    'daphne',  # runserver ASGI, precisa vir antes do staticfiles
    'django.contrib.staticfiles',
]

THIRD_PARTY_APPS = [
    # Async/WebSocket
    'channels',

    # CORS para o frontend
    'corsheaders',

    # Utils
    'django_extensions',
]

LOCAL_APPS = [
    'apps.board',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# === MIDDLEWARE ===

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.urls'

# === TEMPLATES ===

# Sem páginas próprias; usado apenas pelas páginas de erro do Django
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

# === ASGI ===

ASGI_APPLICATION = 'config.asgi.application'

# === BANCO DE DADOS ===

# Sem persistência: o board vive apenas na memória do processo
DATABASES = {}

# === CHANNELS (WebSocket) ===

# Processo único: o fan-out entre servidores está fora do escopo
CHANNEL_LAYERS = {
    'default': {
        'BACKEND': 'channels.layers.InMemoryChannelLayer',
    },
}

# === CORS / ORIGENS PERMITIDAS ===

# CORS_ORIGIN="*" libera qualquer origem; senão lista separada por vírgula
BOARD_ALLOWED_ORIGINS = env('CORS_ORIGIN')

CORS_ALLOW_ALL_ORIGINS = '*' in BOARD_ALLOWED_ORIGINS
CORS_ALLOWED_ORIGINS = [] if CORS_ALLOW_ALL_ORIGINS else BOARD_ALLOWED_ORIGINS
CORS_ALLOW_METHODS = ['GET', 'POST', 'OPTIONS']
CORS_ALLOW_CREDENTIALS = True

# === INTERNACIONALIZAÇÃO ===

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

# === ARQUIVOS ESTÁTICOS ===

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# === LOGGING ===

LOG_LEVEL = env('LOG_LEVEL', default='INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}

# Arquivo de log opcional
if env('LOG_FILE', default=None):
    LOGGING['handlers']['file'] = {
        'level': LOG_LEVEL,
        'class': 'logging.FileHandler',
        'filename': env('LOG_FILE'),
        'formatter': 'verbose',
    }
    LOGGING['root']['handlers'].append('file')
    LOGGING['loggers']['apps']['handlers'].append('file')

# === CONFIGURAÇÕES DO PULSE BOARD ===

# Intervalo de heartbeat sugerido ao cliente (segundos)
BOARD_WS_HEARTBEAT_INTERVAL = env.int('BOARD_WS_HEARTBEAT_INTERVAL', default=30)
