"""Core layers of etrace: node, construction, formatting and inspection.

Submodules are imported explicitly by callers; this package does not
re-export them to keep import order between layers explicit.
"""
