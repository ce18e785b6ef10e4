"""FastAPI backend for anchorstat.

This module contains:
- REST API endpoints for correlation analysis
- Synthetic data generation and chart endpoints
"""

from anchorstat.api.app import app

__all__ = [
    "app",
]
