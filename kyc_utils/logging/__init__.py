from kyc_utils.logging.logger import Log

__all__ = ["Log"]
