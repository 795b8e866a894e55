# =====================================================================
# File: core/__init__.py
# Description: Core package initializer for vexargs
# =====================================================================

"""
Core components of vexargs:
  - Types, status and exceptions
  - Option registry
  - Value classification
  - Tokenizer
  - Parser context and accessors
  - Declaration files and the inspector CLI
"""
