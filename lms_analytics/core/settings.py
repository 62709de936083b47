import os

_LOG_LEVELS = ("debug", "info", "warning", "error")
_TRUTHY = ("1", "true", "yes", "on")


def _getenv(name: str, default: str) -> str:
    return os.environ.get(name, default).strip()


class Settings:
    def __init__(self):
        self.app_name = "LMS Performance Engine"
        self.api_version = "1.0.0"
        self.environment = _getenv("APP_ENV", "development").lower()

        log_level = _getenv("LOG_LEVEL", "info").lower()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be debug|info|warning|error (got {log_level!r})")
        self.log_level = log_level
        self.log_json = _getenv("LOG_JSON", "false").lower() in _TRUTHY

        workers_raw = _getenv("ANALYTICS_MAX_WORKERS", "1")
        try:
            max_workers = int(workers_raw)
        except ValueError:
            raise ValueError(f"ANALYTICS_MAX_WORKERS must be an integer (got {workers_raw!r})") from None
        if max_workers < 1:
            raise ValueError(f"ANALYTICS_MAX_WORKERS must be >= 1 (got {max_workers})")
        self.max_workers = max_workers


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() re-reads the environment."""
    global _settings_instance
    _settings_instance = None
