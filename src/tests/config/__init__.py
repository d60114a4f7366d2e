from .global_configs import test_config

__all__ = ["test_config"]
