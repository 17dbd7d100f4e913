"""Packaged translation documents.

``translations.json`` is the source of ``linguist/_embedded.py``; regenerate
it with ``scripts/embed_translations.py`` after editing. Keeping this as a
real package makes the JSON reachable through importlib.resources.
"""
