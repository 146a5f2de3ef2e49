# config/asgi.py

import os

from django.core.asgi import get_asgi_application

# Configurar Django settings
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

# Importar rotas de WebSocket depois de configurar Django
django_asgi_app = get_asgi_application()

from channels.routing import ProtocolTypeRouter, URLRouter  # noqa: E402
from channels.security.websocket import OriginValidator  # noqa: E402
from django.conf import settings  # noqa: E402

from apps.board.routing import websocket_urlpatterns  # noqa: E402

# Configuração ASGI
application = ProtocolTypeRouter({
    # HTTP tradicional (health + leitura do board)
    "http": django_asgi_app,

    # WebSocket com política de origem (CORS_ORIGIN)
    "websocket": OriginValidator(
        URLRouter(websocket_urlpatterns),
        settings.BOARD_ALLOWED_ORIGINS,
    ),
})
