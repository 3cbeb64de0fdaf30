import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Over-capacity billing
    OVERSPACE_RATE_PER_CBM_PER_WEEK = data.get("OVERSPACE_RATE_PER_CBM_PER_WEEK", "5")  # Currency per m³ per started week
    OVERSPACE_RECALCULATION_ENABLED = bool(data.get("OVERSPACE_RECALCULATION_ENABLED", True))
    OVERSPACE_RECALCULATION_INTERVAL_SECONDS = data.get("OVERSPACE_RECALCULATION_INTERVAL_SECONDS", 86400)  # Daily

    # Client onboarding
    SALES_REP_ROLES = data.get("SALES_REP_ROLES", ["ADMIN", "SUPERADMIN"])
    SYSTEM_REP_PREFIX = data.get("SYSTEM_REP_PREFIX", "SYS")
    CODE_ALLOCATION_MAX_ATTEMPTS = data.get("CODE_ALLOCATION_MAX_ATTEMPTS", 3)
