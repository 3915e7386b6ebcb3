"""
Hooked Sentiment API Routers.
"""
from . import analyze, health, task

__all__ = ["analyze", "health", "task"]
