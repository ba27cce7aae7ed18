"""Configuration: env, Supabase credentials, circle limits."""
import os
from pathlib import Path

# Base paths (project root = parent of frencircle package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so SUPABASE_URL etc. are set
from dotenv import load_dotenv

load_dotenv(BASE_DIR / ".env")

# API
API_HOST = os.getenv("FRENCIRCLE_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("FRENCIRCLE_API_PORT", "8000"))
# Restart the server on code changes (development)
API_RELOAD = os.getenv("FRENCIRCLE_API_RELOAD", "0").lower() in ("1", "true", "yes")
# Browser origin allowed by CORS (e.g. http://localhost:5173 for Vite dev); empty = any
FRENCIRCLE_WEB_ORIGIN = os.getenv("FRENCIRCLE_WEB_ORIGIN", "")

# Supabase (PostgREST under /rest/v1). The access token is the signed-in user's JWT;
# without one, requests go out with the anon key and rely on row level security.
SUPABASE_URL = os.getenv("SUPABASE_URL", "").rstrip("/")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
SUPABASE_ACCESS_TOKEN = os.getenv("SUPABASE_ACCESS_TOKEN", "") or SUPABASE_ANON_KEY
# Owner of every friend row written by this instance
FRENCIRCLE_USER_ID = os.getenv("FRENCIRCLE_USER_ID", "")
STORE_TIMEOUT_SEC = float(os.getenv("FRENCIRCLE_STORE_TIMEOUT", "10"))

# Birthdays roll over at local midnight in this zone (IANA name)
TIMEZONE = os.getenv("FRENCIRCLE_TIMEZONE", "UTC")

# Circles
MAX_FRIENDS_PER_CATEGORY = int(os.getenv("FRENCIRCLE_MAX_FRIENDS_PER_CATEGORY", "75"))
MAX_FAVORITE_ARTISTS = 3
ARTIST_LEADERBOARD_SIZE = int(os.getenv("FRENCIRCLE_ARTIST_LEADERBOARD_SIZE", "5"))

# Notices kept for GET /api/notices
NOTICE_HISTORY = int(os.getenv("FRENCIRCLE_NOTICE_HISTORY", "20"))
