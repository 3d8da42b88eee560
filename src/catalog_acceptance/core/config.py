
import os
from dotenv import load_dotenv
from pathlib import Path

# Load environment variables
load_dotenv()


class AcceptanceConfig:
    """
    Central configuration for catalog acceptance helpers.
    Handles environment variables, paths and UI wait bounds.
    """

    DEFAULT_ADMIN_URL = "http://localhost:8080/wp-admin/"
    DEFAULT_WAIT_TIMEOUT = 15.0
    DEFAULT_HEADER_OFFSET = -200

    @staticmethod
    def get_project_root():
        # This file is in src/catalog_acceptance/core/config.py
        # Root is 3 levels up: core/ -> catalog_acceptance/ -> src/ -> root
        return Path(__file__).parent.parent.parent.parent

    @staticmethod
    def get_admin_url() -> str:
        url = os.getenv("CATALOG_ADMIN_URL", AcceptanceConfig.DEFAULT_ADMIN_URL)
        return url if url.endswith("/") else url + "/"

    @staticmethod
    def get_database_path() -> Path:
        path = os.getenv("CATALOG_DB_PATH")
        if path:
            return Path(path)
        return AcceptanceConfig.get_project_root() / "data" / "catalog.db"

    @staticmethod
    def get_wait_timeout() -> float:
        """Seconds to wait for admin UI elements"""
        return float(os.getenv("CATALOG_WAIT_TIMEOUT", AcceptanceConfig.DEFAULT_WAIT_TIMEOUT))

    @staticmethod
    def get_header_offset() -> int:
        """Vertical scroll offset that keeps targets clear of the fixed admin header"""
        return int(os.getenv("CATALOG_HEADER_OFFSET", AcceptanceConfig.DEFAULT_HEADER_OFFSET))

    @staticmethod
    def get_connect_url():
        return os.getenv("CATALOG_CONNECT_URL")
