"""Donare user-management service."""
