"""
Run Package

Exported Classes:
    Config: Loads the per-run trait specification tables from an INI file
"""

from neatgenes.run.config import Config

__all__ = ['Config']
