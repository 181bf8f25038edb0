"""Capa CLI (Typer + Rich): comandos, impresión y diagnóstico."""
