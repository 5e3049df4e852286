"""
Top‑level package for the Practice CRUD API.

This file makes ``practice_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``practice_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
