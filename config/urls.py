# config/urls.py

from django.urls import path, include

from apps.board import views as board_views

urlpatterns = [
    # Liveness
    path('health', board_views.health, name='health'),

    # Leitura do board via HTTP
    path('tasks/', include('apps.board.urls')),
]
