"""Core: dominio, contratos y servicios de ciclo de vida de clusters."""
