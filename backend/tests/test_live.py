import threading

from ryder.services.live import SessionRegistry, UpdateNotifier


class RecordingSession:
    def __init__(self, sid):
        self.id = sid
        self.received = []

    def send(self, event):
        self.received.append(event)


class BrokenSession(RecordingSession):
    def send(self, event):
        raise ConnectionError('socket closed')


def test_broadcast_reaches_every_session():
    registry = SessionRegistry()
    sessions = [RecordingSession(f's{i}') for i in range(5)]
    for s in sessions:
        registry.register(s)
    assert registry.broadcast('update') == 5
    assert all(s.received == ['update'] for s in sessions)


def test_failed_send_drops_only_that_session():
    registry = SessionRegistry()
    good = [RecordingSession('a'), RecordingSession('c')]
    registry.register(good[0])
    registry.register(BrokenSession('b'))
    registry.register(good[1])
    assert registry.broadcast('update') == 2
    assert 'b' not in registry
    assert len(registry) == 2
    assert all(s.received == ['update'] for s in good)
    # a later broadcast no longer touches the dead session
    assert registry.broadcast('update') == 2


def test_deregister():
    registry = SessionRegistry()
    registry.register(RecordingSession('a'))
    assert registry.deregister('a') is True
    assert registry.deregister('a') is False
    assert registry.broadcast('update') == 0


def test_register_waits_for_running_broadcast():
    registry = SessionRegistry()
    entered, release = threading.Event(), threading.Event()

    class SlowSession(RecordingSession):
        def send(self, event):
            entered.set()
            release.wait(2)
            super().send(event)

    registry.register(SlowSession('slow'))
    broadcaster = threading.Thread(target=registry.broadcast)
    broadcaster.start()
    assert entered.wait(2)

    late = RecordingSession('late')
    joiner = threading.Thread(target=registry.register, args=(late,))
    joiner.start()
    joiner.join(0.1)
    assert joiner.is_alive()

    release.set()
    broadcaster.join(2)
    joiner.join(2)
    assert 'late' in registry
    assert late.received == []


def test_synchronous_notifier_broadcasts_inline():
    registry = SessionRegistry()
    session = RecordingSession('a')
    registry.register(session)
    notifier = UpdateNotifier(registry, synchronous=True)
    assert notifier.notify('holescore') is True
    assert session.received == ['update']


def test_notifier_worker_drains_queue():
    registry = SessionRegistry()
    delivered = threading.Event()

    class SignallingSession(RecordingSession):
        def send(self, event):
            super().send(event)
            delivered.set()

    session = SignallingSession('a')
    registry.register(session)
    notifier = UpdateNotifier(registry, maxsize=4)
    try:
        assert notifier.notify('status') is True
        assert delivered.wait(2)
        assert session.received == ['update']
    finally:
        notifier.stop()


def test_full_queue_coalesces_signals():
    registry = SessionRegistry()
    started = []
    # worker never starts, so the queue fills up
    notifier = UpdateNotifier(registry, maxsize=2, start_task=lambda target: started.append(target) or target)
    results = [notifier.notify(str(i)) for i in range(4)]
    assert results == [True, True, False, False]
    assert len(started) == 1
