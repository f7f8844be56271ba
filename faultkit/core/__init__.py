# faultkit/core/__init__.py
"""Core building blocks for faultkit."""
