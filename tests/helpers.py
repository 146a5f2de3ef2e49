"""Utilitários para os testes de WebSocket."""


async def receber_frames(communicator, quantidade, timeout=1):
    """Lê `quantidade` frames JSON do WebSocket."""
    frames = []
    for _ in range(quantidade):
        frames.append(await communicator.receive_json_from(timeout=timeout))
    return frames


def frames_do_tipo(frames, tipo):
    return [frame for frame in frames if frame['type'] == tipo]
