from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from ryder import db
from ryder.errors import AppError, PersistenceError

error_handlers = Blueprint('error_handlers', __name__)


@error_handlers.app_errorhandler(PersistenceError)
def handle_persistence_error(error):
    current_app.logger.error(f"[persistence] {error.message}")
    return jsonify({'error': error.message}), error.status_code


@error_handlers.app_errorhandler(AppError)
def handle_app_error(error):
    # Rejected commands leave nothing behind
    db.session.rollback()
    current_app.logger.warning(f"[rejected] {type(error).__name__}: {error.message}")
    return jsonify({'error': error.message}), error.status_code


@error_handlers.app_errorhandler(SQLAlchemyError)
def handle_sqlalchemy_error(error):
    db.session.rollback()
    current_app.logger.error(f"[persistence] unhandled database error: {error}")
    return jsonify({'error': 'Operation failed'}), 500


@error_handlers.app_errorhandler(404)
def handle_not_found(error):
    return jsonify({'error': 'Not found'}), 404


@error_handlers.app_errorhandler(405)
def handle_method_not_allowed(error):
    return jsonify({'error': 'Method not allowed'}), 405
