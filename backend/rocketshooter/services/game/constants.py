"""Playfield geometry and fixed game tuning."""

FIELD_WIDTH = 800
FIELD_HEIGHT = 600

PLAYER_WIDTH = 50
PLAYER_HEIGHT = 50
PLAYER_STEP = 20

BULLET_WIDTH = 5
BULLET_HEIGHT = 20
BULLET_STEP = 10
BULLET_COOLDOWN = 300  # ms

ROCKET_WIDTH = 40
ROCKET_HEIGHT = 40
ROCKET_BASE_STEP = 2

TICK_INTERVAL_MS = 50
SPAWN_BASE_INTERVAL_MS = 2000
FACT_INTERVAL_MS = 10000

SCORE_TIER = 20

PHASE_PRE_GAME = 'pre-game'
PHASE_RUNNING = 'running'
PHASE_GAME_OVER = 'game-over'

PAUSE_KEY = 'p'
LEFT_KEY = 'ArrowLeft'
RIGHT_KEY = 'ArrowRight'
FIRE_KEY = ' '

SOUND_SHOOT = 'shoot'
SOUND_HIT = 'hit'
SOUND_MILESTONE = 'score20'
SOUND_GAME_OVER = 'gameover'

WELCOME_TEXT = 'Welcome to Rocket Shooter!'
GET_READY_TEXT = 'Get ready to blast rockets!'
