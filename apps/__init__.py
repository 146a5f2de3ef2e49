# apps/__init__.py

"""
Pulse Board - Aplicações Django

Este pacote contém as aplicações do sistema:
- board: Store de tarefas, protocolo de sincronização e WebSockets
"""

__version__ = '0.1.0'
__author__ = 'Equipe Pulse'
