"""Physical, scaling and display constants."""

# Physics
G_REAL = 6.674e-11  # m^3 kg^-1 s^-2

# Scale factors of the reference scenario (positions in 1e10 m, masses in 1e30 kg)
DISTANCE_SCALE = 1e10
MASS_SCALE = 1e30

TIME_STEP_BASE = 500.0  # seconds per tick
TICKS_PER_FRAME = 10000
VIEW_EXTENT = 5e12  # half-width of the visible region in metres

BACKENDS = ("vector", "numpy", "numba")
DEFAULT_BACKEND = "vector"
# frame batching in the viewer needs the compiled kernel to keep up
CLI_BACKEND = "numba"

# Units used for display only
AU = 1.496e11
SOLAR_MASS = 1.989e30
EARTH_MASS = 5.972e24

# Display
WIDTH, HEIGHT = 800, 800
FPS_LIMIT = 60
TITLE = "TreBody"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
DARK_GRAY = (50, 50, 50)
GRAY = (150, 150, 150)
BODY_COLORS = (WHITE, GREEN, RED)
BODY_RADIUS_PIXELS = 3

DEFAULT_TRAIL_LENGTH = 600
MIN_TRAIL_LENGTH = 10
MAX_TRAIL_LENGTH = 5000

ENERGY_HISTORY_POINTS = 500
