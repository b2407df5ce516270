# -*- coding: utf-8 -*-
"""
Profile Wizard Application Core Module
"""

from .config import Config, ProfileVocabularies

__all__ = ["Config", "ProfileVocabularies"]
