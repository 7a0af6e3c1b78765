from flask import Blueprint, jsonify, request, current_app
import requests

from rocketshooter.services.facts import (
    RELAY_PROMPT,
    FactServiceError,
    FactServiceNotConfigured,
    build_contents,
    describe_error,
    generate_content,
)

facts = Blueprint('facts', __name__)


@facts.route('/rocket-fact', methods=['POST'])
def rocket_fact():
    """Relay a prompt to Gemini and hand back its raw JSON answer."""
    data = request.get_json(silent=True) or {}
    contents = data.get('contents')
    if not isinstance(contents, list) or not contents:
        contents = build_contents(RELAY_PROMPT)

    try:
        payload = generate_content(current_app._get_current_object(), contents)
    except FactServiceNotConfigured as exc:
        current_app.logger.error(f"[fact] relay unavailable: {exc}")
        return jsonify({'error': 'Fact service is not configured'}), 503
    except (requests.exceptions.RequestException, FactServiceError) as exc:
        current_app.logger.error(f"[fact] Gemini proxy error: {describe_error(exc)}")
        return jsonify({'error': 'Failed to fetch from Gemini'}), 500
    return jsonify(payload)
