# apps/board/__init__.py

"""
Board - Aplicação Kanban do Pulse Board

Funcionalidades:
- Store de tarefas em memória
- WebSockets para sincronização em tempo real (snapshot completo)
- Endpoints HTTP de health e leitura do board
"""
