from flask import Blueprint, current_app, jsonify

from ryder.services.standings import build_snapshot
from ryder.services.store import store

standings = Blueprint('standings', __name__)


@standings.route('/dashboard', methods=['GET'])
def dashboard():
    """Teams with finalized points, matches grouped by status, projections."""
    return jsonify(build_snapshot(store, logger=current_app.logger))
