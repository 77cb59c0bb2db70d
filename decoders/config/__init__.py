"""
Configuration for decoders.
"""
from .settings import DecoderSettings, SETTINGS_VALIDATOR

__all__ = [
    'DecoderSettings',
    'SETTINGS_VALIDATOR',
]
