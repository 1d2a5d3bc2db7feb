from fallback_value.testing import fallback_config

__all__ = ["fallback_config"]
