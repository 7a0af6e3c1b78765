import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Browser origins allowed to open the socket / call the relay (comma separated)
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS',
        'http://localhost:5000,http://127.0.0.1:5000,http://localhost:5173,http://127.0.0.1:5173',
    ).split(',') if o.strip()]
    # Gemini relay
    GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY')
    GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.5-flash')
    GEMINI_API_URL = os.environ.get('GEMINI_API_URL', 'https://generativelanguage.googleapis.com/v1beta/models')
    FACT_TIMEOUT_SEC = float(os.environ.get('FACT_TIMEOUT_SEC', '8'))
    # Game loop timers (milliseconds)
    TICK_INTERVAL_MS = int(os.environ.get('TICK_INTERVAL_MS', '50'))
    SPAWN_BASE_INTERVAL_MS = int(os.environ.get('SPAWN_BASE_INTERVAL_MS', '2000'))
    FACT_INTERVAL_MS = int(os.environ.get('FACT_INTERVAL_MS', '10000'))
    # Optional: heartbeat interval for timer worker logs (sec). 0 disables.
    TIMER_HEARTBEAT_SEC = int(os.environ.get('TIMER_HEARTBEAT_SEC', '0'))
