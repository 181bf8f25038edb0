"""Adaptadores de I/O (HTTP sobre el socket del backend de Docker Desktop)."""
