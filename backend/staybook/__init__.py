"""Staybook — accommodation and booking management service."""
