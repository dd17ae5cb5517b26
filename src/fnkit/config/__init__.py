"""Configuration layer — settings models, discovery, logging setup.

Nothing here is imported by :mod:`fnkit.types`; only :mod:`fnkit.pure`
reads settings, and only when no explicit ``maxsize`` is given.
"""
