#!/usr/bin/env python
"""
Django's command-line utility for administrative tasks.

Pulse Board - Kanban em tempo real
"""

import os
import sys


def main():
    """Run administrative tasks."""

    # Configuração padrão para desenvolvimento
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    # Comandos customizados do Pulse Board
    if len(sys.argv) > 1:
        command = sys.argv[1]

        # runserver sem endereço usa a porta do ambiente (PORT, padrão 5000)
        if command == 'runserver':
            argumentos = [arg for arg in sys.argv[2:] if not arg.startswith('-')]
            if not argumentos:
                from django.conf import settings
                print(f"🌐 Subindo o board na porta {settings.PORT}")
                sys.argv.append(str(settings.PORT))

        # Verificação rápida da configuração
        elif command == 'board-check':
            print("🧪 Verificando configuração do Pulse Board...")
            import django
            django.setup()

            from django.apps import apps
            from django.conf import settings

            service = apps.get_app_config('board').sync_service
            print(f"✅ Store em memória pronto ({len(service.store)} tarefas)")
            print(f"🌐 Porta: {settings.PORT}")
            print(f"🔒 Origens permitidas: {', '.join(settings.BOARD_ALLOWED_ORIGINS)}")
            print(f"📡 Channel layer: {settings.CHANNEL_LAYERS['default']['BACKEND']}")
            return

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
