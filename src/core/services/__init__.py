"""Servicios del Core: admins por producto y orquestación."""
