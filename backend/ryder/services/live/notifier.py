import logging
import queue
import threading

from .registry import SessionRegistry

log = logging.getLogger(__name__)

UPDATE_EVENT = 'update'
_STOP = object()


class UpdateNotifier:
    """Fans a coarse "something changed" signal out to every live viewer.

    Commands call ``notify`` once after their write commits. The signal is
    queued and broadcast by a dedicated worker so the command's response
    never waits on the fan-out. The queue is bounded; when it is full the
    new signal is dropped because the pending ones already tell every
    viewer to re-fetch.
    """

    def __init__(self, registry=None, maxsize=64, synchronous=False, start_task=None, logger=None):
        self.registry = registry or SessionRegistry()
        self.synchronous = synchronous
        self._queue = queue.Queue(maxsize=maxsize)
        self._start_task = start_task or _start_thread
        self._log = logger or log
        self._worker = None
        self._worker_lock = threading.Lock()

    def init_app(self, app, socketio) -> None:
        self.stop()
        self.registry = SessionRegistry(logger=app.logger)
        self.synchronous = bool(app.config.get('NOTIFIER_SYNC') or app.config.get('TESTING'))
        self._queue = queue.Queue(maxsize=int(app.config.get('NOTIFIER_QUEUE_SIZE', 64)))
        self._start_task = socketio.start_background_task
        self._log = app.logger
        app.extensions['ryder_notifier'] = self

    def notify(self, reason: str = '') -> bool:
        """Schedule one broadcast; returns False if it was coalesced."""
        if self.synchronous:
            self._broadcast(reason)
            return True
        self._ensure_worker()
        try:
            self._queue.put_nowait(reason)
        except queue.Full:
            self._log.debug(f"[notify-coalesced] reason={reason} pending={self._queue.qsize()}")
            return False
        return True

    def run(self) -> None:
        """Worker loop: drain the queue until ``stop`` is called."""
        while True:
            reason = self._queue.get()
            try:
                if reason is _STOP:
                    return
                self._broadcast(reason)
            finally:
                self._queue.task_done()

    def stop(self, timeout: float = 1.0) -> None:
        with self._worker_lock:
            if self._worker is None:
                return
            self._worker = None
        try:
            self._queue.put(_STOP, timeout=timeout)
        except queue.Full:
            self._log.warning('[notifier] queue full, worker not told to stop')

    def _ensure_worker(self) -> None:
        with self._worker_lock:
            if self._worker is None:
                self._worker = self._start_task(self.run)

    def _broadcast(self, reason: str) -> int:
        delivered = self.registry.broadcast(UPDATE_EVENT)
        self._log.info(f"[broadcast] reason={reason} delivered={delivered}")
        return delivered


def _start_thread(target):
    worker = threading.Thread(target=target, name='ryder-notifier', daemon=True)
    worker.start()
    return worker


notifier = UpdateNotifier()
