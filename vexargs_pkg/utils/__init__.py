# =====================================================================
# File: utils/__init__.py
# Description: Utilities package initializer for vexargs
# =====================================================================

"""
Utility helpers for vexargs:
  - Leveled logging
  - Default options and layout constants
"""
