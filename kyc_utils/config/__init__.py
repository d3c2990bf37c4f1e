from kyc_utils.config.settings import Settings

__all__ = ["Settings"]
