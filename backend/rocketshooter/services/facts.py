"""Rocket facts from the Gemini ``generateContent`` API.

Used both by the ``/rocket-fact`` relay endpoint and by the in-game fact
timer. Failures never reach the game: callers get a placeholder string.
"""
import re
from typing import Any, Dict, List, Optional

import requests

RELAY_PROMPT = 'Give me a fun fact about rockets.'
FACT_PROMPT = 'Give me ONE short, interesting fact about rockets. Keep it under 8 words.'
FACT_UNAVAILABLE = 'Rocket fact unavailable.'
FACT_FAILED = 'Could not fetch rocket fact.'
MAX_FACT_LENGTH = 100


class FactServiceError(Exception):
    """Gemini could not be called or answered with something unusable."""


class FactServiceNotConfigured(FactServiceError):
    """No Gemini API key is set."""


def build_contents(prompt: str) -> List[Dict[str, Any]]:
    return [{'parts': [{'text': prompt}]}]


def generate_content(app, contents: List[Dict[str, Any]]) -> Dict[str, Any]:
    """POST ``contents`` to Gemini and return the decoded JSON response.

    Raises FactServiceNotConfigured without an API key and FactServiceError
    for a non-JSON body; transport and HTTP status errors surface as
    ``requests.exceptions.RequestException``.
    """
    api_key = app.config.get('GEMINI_API_KEY')
    if not api_key:
        raise FactServiceNotConfigured('GEMINI_API_KEY is not configured')

    base = app.config.get('GEMINI_API_URL', '').rstrip('/')
    model = app.config.get('GEMINI_MODEL', 'gemini-2.5-flash')
    response = requests.post(
        f"{base}/{model}:generateContent",
        params={'key': api_key},
        json={'contents': contents},
        timeout=float(app.config.get('FACT_TIMEOUT_SEC', 8)),
    )
    response.raise_for_status()
    try:
        return response.json()
    except ValueError as exc:
        raise FactServiceError('Gemini returned a non-JSON body') from exc


def extract_fact(payload: Any) -> str:
    """Pull the first candidate's text out of a Gemini response."""
    try:
        text = payload['candidates'][0]['content']['parts'][0]['text']
    except (KeyError, IndexError, TypeError):
        text = None
    fact = text.strip() if isinstance(text, str) else ''
    if not fact:
        return FACT_UNAVAILABLE
    if len(fact) > MAX_FACT_LENGTH:
        fact = re.split(r'[.!?]', fact)[0] + '.'
    return fact


def describe_error(exc: Exception) -> str:
    response = getattr(exc, 'response', None)
    if response is not None:
        return f"{response.status_code} {response.text[:200]}"
    return str(exc)


def fetch_rocket_fact(app, previous: Optional[str] = None) -> str:
    """Ask Gemini for a short fact; keep ``previous`` if the call fails."""
    try:
        payload = generate_content(app, build_contents(FACT_PROMPT))
    except (requests.exceptions.RequestException, FactServiceError) as exc:
        app.logger.error(f"[fact] Gemini API error: {describe_error(exc)}")
        return previous or FACT_FAILED
    return extract_fact(payload)
