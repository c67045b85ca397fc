"""School administration front end.

The package is organized by concern (gateway, store, workflow, notifications,
pages) with per-resource definitions under ``resources`` and a thin Flask
controller layer on top.
"""
