"""Live viewer fan-out: session registry and the update notifier."""

from .notifier import UPDATE_EVENT, UpdateNotifier, notifier
from .registry import SessionRegistry, SocketIOSession

__all__ = ['UPDATE_EVENT', 'SessionRegistry', 'SocketIOSession', 'UpdateNotifier', 'notifier']
