"""dbrowser - a terminal browser for debots."""

from .env import BrowserEnv
from .framework import BrowserFramework
from .router import Router, run_browser
from .types import STATE_EXIT, Action

__version__ = "0.1.0"

__all__ = ["STATE_EXIT", "Action", "BrowserEnv", "BrowserFramework", "Router", "run_browser"]
