"""Wellness Journal API package."""
