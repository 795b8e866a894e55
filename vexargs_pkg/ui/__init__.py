# =====================================================================
# File: ui/__init__.py
# Description: Text rendering for vexargs
# =====================================================================

"""
Text output:
  - Usage / help rendering
  - Token tables for the inspector
"""
