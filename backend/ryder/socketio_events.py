from flask import current_app, request
from flask_socketio import emit

from ryder import socketio
from ryder.services.live import SocketIOSession, notifier

NAMESPACE = '/ws'


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect():
    sid = _get_sid()
    notifier.registry.register(SocketIOSession(sid, socketio, namespace=NAMESPACE))
    current_app.logger.info(f"[ws-connect] session={sid} viewers={len(notifier.registry)}")
    emit('connected', {'message': f'Connected to {NAMESPACE}'})


def handle_disconnect(*args):
    sid = _get_sid()
    notifier.registry.deregister(sid)
    current_app.logger.info(f"[ws-disconnect] session={sid} viewers={len(notifier.registry)}")


def handle_ping(data=None):
    emit('pong', {'message': 'pong'})


def register_socketio_handlers() -> None:
    """Register the live-update handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('ping', handle_ping, namespace=NAMESPACE)
