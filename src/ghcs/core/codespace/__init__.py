"""Codespace registry and selection engine."""
