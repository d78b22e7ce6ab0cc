from flask import Blueprint, jsonify

from ryder.services.live import notifier

main = Blueprint('main', __name__)


@main.route('/health')
def health():
    return jsonify({'message': 'Ryder standings server', 'viewers': len(notifier.registry)})
