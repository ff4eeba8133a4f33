"""
gh-not - GitHub notifications, locally.

Mirrors your GitHub notifications into a local cache, merges every refresh
into it, and lets you hide or clear threads without losing track of them.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from ghnot.core.notifications.models import LifecycleState, Notification

__all__ = ["LifecycleState", "Notification", "__version__"]
