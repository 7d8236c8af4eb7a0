"""Servicios del Core (lógica sin efectos de E/S)."""
