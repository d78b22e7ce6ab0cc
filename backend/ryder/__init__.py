from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Live update fan-out; synchronous under TESTING
    from ryder.services.live import notifier
    notifier.init_app(flask_app, socketio)

    from ryder.error_handlers import error_handlers
    flask_app.register_blueprint(error_handlers)

    from ryder.main import main
    flask_app.register_blueprint(main)

    # Mount JSON routes under /api to match the dashboard and score pages
    from ryder.api.standings import standings
    from ryder.api.matches import matches
    from ryder.api.teams import teams
    from ryder.api.players import players
    for blueprint in (standings, matches, teams, players):
        flask_app.register_blueprint(blueprint, url_prefix='/api')

    from ryder.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database with two teams."""
        from ryder.models import Team
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            for name, color in (('Europe', '#003399'), ('USA', '#b22234')):
                db.session.add(Team(name=name, color=color))

            db.session.commit()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
