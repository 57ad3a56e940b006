"""Service modules"""
from .demo import run_demo
from .quickstart import QuickstartService

__all__ = ["QuickstartService", "run_demo"]
