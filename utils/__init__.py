"""
utils/ - Shared Helpers
=======================
Logging setup and request-identifier parsing used across layers.
"""
