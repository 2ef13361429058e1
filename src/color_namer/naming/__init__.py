# color_namer/naming/__init__.py

"""
naming.
======

Does: Namespace for the color-domain code (`naming.color`) and the shared
      helpers it builds on (`naming.general`).
Used by: Package root exports, demo CLI, tests.
"""

__all__: list[str] = []
__docformat__ = "google"
