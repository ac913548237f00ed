"""Shared helpers for translation-sync."""
