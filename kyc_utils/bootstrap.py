from kyc_utils.config.settings import Settings
from kyc_utils.logging.logger import Log


def configure(settings: Settings | None = None) -> Settings:
    """Load settings (unless given) and wire them into the logger."""
    settings = settings or Settings()
    Log.configure(settings.log_level)
    Log.debug(f"kyc_utils configured for '{settings.app_env}' environment")
    return settings
