"""
Standalone front-end tools.
"""
