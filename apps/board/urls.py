# apps/board/urls.py

from django.urls import path
from . import views

app_name = 'board'

urlpatterns = [
    # Snapshot do board
    path('', views.task_list, name='task_list'),

    # Dados do gráfico de progresso
    path('summary/', views.task_summary, name='task_summary'),
]
