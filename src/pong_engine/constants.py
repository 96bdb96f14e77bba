"""
Fixed game constants for Pong Engine.
"""

from __future__ import annotations

import math

from pong_engine.vector import Vector

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 600

PADDLE_WIDTH = 10
PADDLE_HEIGHT = 80
PADDLE_STEP = 10  # pixels per key press

RIGHT_PADDLE_ID = "rightPaddle"
LEFT_PADDLE_ID = "leftPaddle"
RIGHT_PADDLE_START_POSITION = Vector(580, 260)
LEFT_PADDLE_START_POSITION = Vector(10, 260)

BALL_ID = "ball"
BALL_RADIUS = 6
BALL_CENTRE = Vector(CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)
DEFAULT_BALL_VELOCITY = Vector(2.5, -3.5)

MAX_ANGLE = math.radians(80)
FINAL_SCORE = 7

FPS = 70

DEFAULT_SEED = 20
