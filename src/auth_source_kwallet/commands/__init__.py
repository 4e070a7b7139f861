from .base import BaseCommand

__all__ = ["BaseCommand"]
