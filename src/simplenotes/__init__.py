"""
SimpleNotes Backend - Minimal Note-Taking REST API

Create, list, fetch and delete text notes over HTTP.

Version: 1.0.0
"""

__version__ = "1.0.0"
