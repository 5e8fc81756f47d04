# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Test environment: must be in place before rosca reads its settings."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DEFAULT_MEMBERS", "false")
os.environ.setdefault("NOTIFICATION_SERVICE_URL", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")
