from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or '*'
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Import and register blueprints here
    from rocketshooter.routes import main
    flask_app.register_blueprint(main)

    from rocketshooter.api.facts import facts
    flask_app.register_blueprint(facts)

    # Register Socket.IO event handlers
    # Importing here ensures the handlers bind to the initialized socketio instance
    from rocketshooter.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('rocket-fact')
    def rocket_fact_command():
        """Fetches one rocket fact through the Gemini relay and prints it."""
        from rocketshooter.services.facts import fetch_rocket_fact
        with flask_app.app_context():
            fact = fetch_rocket_fact(flask_app, previous=None)
            click.echo(fact)

    flask_app.cli.add_command(rocket_fact_command)

    return flask_app
