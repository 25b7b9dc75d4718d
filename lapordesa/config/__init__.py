"""
Configuration package for the village feedback service.
"""

from lapordesa.config.settings import Settings, get_settings

__all__ = ['Settings', 'get_settings']
