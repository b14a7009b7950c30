# money_plant/__init__.py
from .app import create_app

__all__ = ["create_app"]
