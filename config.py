# === Global configuration & tuning ===
WIDTH, HEIGHT = 960, 540
FPS = 60

# Colors
BG = (36, 36, 36)  # Clear color behind the sky
SKY_BLUE = (135, 207, 235)
GROUND_COL = (154, 205, 50)
PLATFORM_COL = (54, 60, 78)
RED = (220, 72, 72)
GREEN = (80, 200, 120)
WHITE = (240, 240, 240)

# Camera
SCROLL_SPEED = 10.0      # world px per second, upward
SPAWN_MARGIN = 0.0       # how far above the top of the view the spawn line sits

# Platforms
PLATFORM_W = 96
PLATFORM_H = 12
GROUND_H = 60            # height of the starting ground strip

# === Platform spawn tuning ===
# Reach distance is drawn per spawn attempt from Normal(MEAN, STD), clamped.
MIN_PLATFORM_DISTANCE = 5.0
MAX_PLATFORM_DISTANCE = 250.0
PLATFORM_DISTANCE_MEAN = 50.0
PLATFORM_DISTANCE_STD = 10.0

# "index" picks a free region uniformly by count, "width" weights by its length
SAMPLING_POLICY = "index"
MIN_REGION_WIDTH = 0.0
MAX_SPAWNS_PER_TICK = 1

# Runtime defaults
SPAWN_CONFIG_PATH = "config/spawn_config.json"
DEFAULT_SEED = 12345
