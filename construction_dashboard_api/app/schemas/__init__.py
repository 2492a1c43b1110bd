"""
Pydantic schema definitions for records and API payloads.

Each domain (projects, tasks, resources) defines its own Create /
Update / Read models.  Field aliases follow the camelCase names used
by the seed fixtures and the dashboard front end.
"""
