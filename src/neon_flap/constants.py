"""
constants.py: Centralized configuration for game and render settings.

World coordinates are normalized: x and y span [-1, 1] across the window,
y grows downward. Physics constants are per second so the loop can be
driven with any frame time.
"""

# -------- Time Config --------
TICK_RATE = 60                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (Delta Time)
RENDER_FPS = 60

# -------- Game World Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800
ACTOR_X = 0.0                   # Fixed actor X position (normalized)
RESPAWN_Y = 0.0                 # Screen center
UPPER_BOUND_Y = 1.0             # Below the bottom edge
LOWER_BOUND_Y = -1.1            # Above the top edge

# -------- Physics Config (normalized units / second) --------
GRAVITY_ACCEL = 2.52            # 0.0007 per frame^2 at 60 fps
JUMP_IMPULSE = -0.72            # Instantaneous velocity override (upward)
ROTATION_GAIN = 5.0 / 60.0      # Radians per unit/s of velocity
MAX_TILT = 0.5                  # Radians

# -------- Pipe Config --------
PIPE_COUNT = 2
PIPE_START_X = (1.5, 3.0)
PIPE_START_HEIGHTS = (200.0, 300.0)  # Top pipe height (pixels)
PIPE_SPACING = 1.5
PIPE_WRAP_DISTANCE = PIPE_COUNT * PIPE_SPACING
PIPE_SPEED = 0.9                # Leftward scroll (units/second)
PIPE_WRAP_X = -1.5              # Fully off the left edge
PIPE_MIN_HEIGHT = 100.0
PIPE_HEIGHT_RANGE = 300.0
PIPE_GAP = 310.0                # Vertical gap (pixels)
PIPE_WIDTH = 60                 # Render width (pixels)
PIPE_HIT_HALF_SPAN = 0.3        # Pipes within +/- this of ACTOR_X can collide

# -------- Particle Config --------
PARTICLE_SPAWN_CHANCE = 0.5     # Per tick
PARTICLE_OFFSET_X = -0.2        # Spawned behind the actor
PARTICLE_MIN_SPEED = 1.2        # Leftward (units/second)
PARTICLE_SPEED_RANGE = 1.2
PARTICLE_DRIFT = 0.3            # Max vertical speed either way
PARTICLE_DECAY = 1.2            # Life lost per second
PARTICLE_COLORS = ("magenta", "cyan")

# -------- Render Config --------
BIRD_WIDTH = 40
BIRD_HEIGHT = 30
BACKGROUND = (13, 2, 33)
NEON_CYAN = (0, 240, 255)
NEON_MAGENTA = (255, 0, 224)
NEON_RED = (255, 0, 85)
PIPE_FILL = (27, 2, 56)
STAR_COUNT = 100
STAR_SEED = 42                  # Same sky every run
