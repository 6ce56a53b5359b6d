"""
Utilities: configuration loading and logging setup.
"""
