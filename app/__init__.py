# -*- coding: utf-8 -*-
"""
MTCIT Application Core Module
"""

from .config import Config

__all__ = ["Config"]
