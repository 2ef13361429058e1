"""
general
=======

Does: Domain-agnostic helpers shared by the color naming code
      (data-table loading, topic debug logging, token normalization).
"""

__all__: list[str] = []
__docformat__ = "google"
