"""
Run Package

Exported Classes:
    Config: Parameters used when building networks from topology descriptions
"""

from neatsynapse.run.config import Config

__all__ = ['Config']
