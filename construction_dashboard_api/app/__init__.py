"""
Application package initializer.

Each domain (projects, tasks, materials, equipment, subcontractors)
exposes a service in ``services``, its models in ``schemas`` and a
router in ``api/v1/endpoints``.  Filtering, sorting and grouping live
in ``filters`` as plain functions so they can be used without the web
layer.
"""

from .main import app  # noqa: F401
