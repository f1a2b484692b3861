# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de servicios que adapta el núcleo a la interfaz de usuario.
# --------------------------------------------------------------
"""Inicializa el paquete `api`."""
