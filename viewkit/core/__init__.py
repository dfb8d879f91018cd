# viewkit/core/__init__.py
"""Core primitives: key matching, view content, locals resolution, discovery."""
