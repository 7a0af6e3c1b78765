from flask import Blueprint, jsonify, current_app

from rocketshooter.services.game import constants

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return current_app.send_static_file('index.html')

@main.route('/api/status')
def status():
    return jsonify({
        'message': 'Welcome to the Rocket Shooter game server!',
        'field': {'width': constants.FIELD_WIDTH, 'height': constants.FIELD_HEIGHT},
        'fact_service': bool(current_app.config.get('GEMINI_API_KEY')),
    })
