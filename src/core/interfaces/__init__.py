"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el admin depende del contrato del cliente
  de settings, no del socket de Docker Desktop.
"""
