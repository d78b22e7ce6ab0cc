import os


def _flag(name, default='0'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///ryder.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Origins allowed to open the dashboard/score pages against this API
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS', 'http://localhost:8080,http://127.0.0.1:8080').split(',') if o.strip()]
    # Live updates: pending invalidations beyond this are coalesced
    NOTIFIER_QUEUE_SIZE = int(os.environ.get('NOTIFIER_QUEUE_SIZE', '64'))
    # Broadcast inline instead of from the background worker
    NOTIFIER_SYNC = _flag('NOTIFIER_SYNC')
    # Forward-only match status moves (prepared -> running -> completed)
    STRICT_STATUS_TRANSITIONS = _flag('STRICT_STATUS_TRANSITIONS')
