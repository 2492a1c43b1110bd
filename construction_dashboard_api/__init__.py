"""
Top-level package for the Construction Dashboard API.

The package provides no public exports; all functionality lives in
submodules under ``app``, e.g. ``construction_dashboard_api.app.main``.
"""

__all__ = []
