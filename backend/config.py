import os
from pathlib import Path
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

APP_NAME = os.environ.get("APP_NAME", "StockBoard API")

# Load the sample inventory on startup
SEED_SAMPLE_DATA = os.environ.get("SEED_SAMPLE_DATA", "true").lower() == "true"

REPORT_TOP_N = int(os.environ.get("REPORT_TOP_N", "5"))
RECENT_UPDATES_LIMIT = int(os.environ.get("RECENT_UPDATES_LIMIT", "5"))
# Items plotted on the stock level bar chart
STOCK_CHART_LIMIT = int(os.environ.get("STOCK_CHART_LIMIT", "6"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8001"))
