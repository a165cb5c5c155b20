"""ClickUp API access for clickuTime."""

from .client import ClickUpClient, ClickUpError

__all__ = ['ClickUpClient', 'ClickUpError']
