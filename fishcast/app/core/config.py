# fishcast/app/core/config.py
import os
from dotenv import load_dotenv

# Load environment variables from .env.local in the project root
load_dotenv(dotenv_path=os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', '..', '.env.local')))


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Database connection URL. SQLite by default; point it at PostgreSQL in deployment.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./fishing_app.db")
SQL_ECHO = _env_flag("SQL_ECHO", "false") # Log every SQL statement

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Auth ---
JWT_SECRET = os.getenv("JWT_SECRET", "change-me-in-production")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", 30))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))

# Local time zone of the fishing grounds, used for the dawn/dusk bonus
FISHING_TIMEZONE = os.getenv("FISHING_TIMEZONE", "Pacific/Auckland")

# --- Scheduled environmental refresh ---
ENABLE_SCHEDULER = _env_flag("ENABLE_SCHEDULER", "true")
REFRESH_INTERVAL_HOURS = int(os.getenv("REFRESH_INTERVAL_HOURS", 3))
INITIAL_REFRESH_DELAY_SECONDS = int(os.getenv("INITIAL_REFRESH_DELAY_SECONDS", 5))

# Coordinates used when /conditions/current is called without lat/lng
DEFAULT_COORDS = {"lat": -34.25, "lng": 173.25}

GRID_RESOLUTION = 0.02 # degrees, roughly 2 km
NEARBY_BOX_DEGREES = 0.1 # half-width of the box searched for a stored reading
MAX_GRID_CELLS = 10000 # largest simulated grid served in one response
GRID_FRESHNESS_HOURS = 6

# Uniform ranges used when a reading has to be simulated
SIMULATION_RANGES = {
    "sea_temperature": (18.0, 26.0), # °C
    "current_speed": (0.0, 1.5), # m/s
    "chlorophyll": (0.0, 0.6), # mg/m³
    "wind_speed": (5.0, 25.0), # knots
    "wave_height": (0.5, 3.0), # meters
}

# --- Predictions ---
PREDICTION_LOCATIONS = [
    {"name": "North Cape", "lat": -34.42, "lng": 173.05},
    {"name": "King Bank", "lat": -34.15, "lng": 173.8},
    {"name": "Middlesex Bank", "lat": -34.3, "lng": 173.6},
    {"name": "Three Kings", "lat": -34.17, "lng": 172.13},
]
TARGET_SPECIES = ["Blue Marlin", "Striped Marlin", "Yellowfin Tuna", "Bigeye Tuna", "Albacore Tuna"]
DEFAULT_PREDICTION_HOURS = 24

# Points sampled by the scheduled refresh job
REFERENCE_LOCATIONS = [
    {"lat": -34.42, "lng": 173.05},
    {"lat": -34.15, "lng": 173.8},
    {"lat": -34.3, "lng": 173.6},
    {"lat": -34.25, "lng": 173.25},
]

# --- Hotspots ---
HOTSPOT_BOX_DEGREES = 0.05
HOTSPOT_RECENT_DAYS = 30
SEED_HOTSPOTS = [
    {
        "name": "Bay of Islands", "latitude": -35.25, "longitude": 174.1,
        "description": "Protected bay area, good for smaller pelagics and kingfish",
        "species_common": ["Kingfish", "Snapper", "Trevally"],
        "best_months": [12, 1, 2, 3], "avg_success_rate": 65.5,
    },
    {
        "name": "North Cape", "latitude": -34.42, "longitude": 173.05,
        "description": "Current convergence zone - premier marlin fishing area",
        "species_common": ["Blue Marlin", "Striped Marlin", "Yellowfin Tuna"],
        "best_months": [1, 2, 3, 4, 11, 12], "avg_success_rate": 78.2,
    },
    {
        "name": "King Bank", "latitude": -34.15, "longitude": 173.8,
        "description": "Underwater seamount - major tuna aggregation area",
        "species_common": ["Yellowfin Tuna", "Bigeye Tuna", "Albacore"],
        "best_months": [11, 12, 1, 2, 3, 4], "avg_success_rate": 72.8,
    },
    {
        "name": "Middlesex Bank", "latitude": -34.3, "longitude": 173.6,
        "description": "Deep water bank - consistent big game fishing",
        "species_common": ["Blue Marlin", "Bigeye Tuna", "Mako Shark"],
        "best_months": [12, 1, 2, 3], "avg_success_rate": 69.4,
    },
    {
        "name": "Three Kings Islands", "latitude": -34.17, "longitude": 172.13,
        "description": "Remote islands with pristine fishing",
        "species_common": ["Marlin", "Tuna", "Kingfish", "Hapuku"],
        "best_months": [1, 2, 3, 4], "avg_success_rate": 75.6,
    },
]
