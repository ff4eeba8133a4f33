"""Core logic for gh-not: notifications, cache, sync, GitHub access."""
