"""Data models for pages and sync targets."""

from src.models.page import Page
from src.models.sync_target import SyncTarget

__all__ = ['Page', 'SyncTarget']
