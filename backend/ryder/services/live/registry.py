import logging
import threading
from typing import Dict

log = logging.getLogger(__name__)


class SocketIOSession:
    """A connected viewer, addressed by its Socket.IO sid."""

    def __init__(self, sid: str, socketio, namespace: str = '/ws'):
        self.id = sid
        self._socketio = socketio
        self._namespace = namespace

    def send(self, event: str) -> None:
        self._socketio.emit(event, {}, to=self.id, namespace=self._namespace)

    def __repr__(self):
        return f"<SocketIOSession {self.id} {self._namespace}>"


class SessionRegistry:
    """Connected viewer sessions behind one lock.

    ``register``, ``deregister`` and the whole of ``broadcast`` run under the
    same lock, so a slow broadcast delays new connections until it is done.
    A session whose send fails is dropped during that broadcast.
    """

    def __init__(self, logger=None):
        self._lock = threading.Lock()
        self._sessions: Dict[str, object] = {}
        self._log = logger or log

    def register(self, session) -> None:
        with self._lock:
            self._sessions[session.id] = session

    def deregister(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def broadcast(self, event: str = 'update') -> int:
        """Send ``event`` to every session; returns how many sends succeeded."""
        delivered = 0
        with self._lock:
            dead = []
            for sid, session in self._sessions.items():
                try:
                    session.send(event)
                    delivered += 1
                except Exception as exc:  # one broken channel must not stop the fan-out
                    self._log.warning(f"[broadcast-fail] session={sid} dropped: {exc}")
                    dead.append(sid)
            for sid in dead:
                self._sessions.pop(sid, None)
        return delivered

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id):
        with self._lock:
            return session_id in self._sessions
