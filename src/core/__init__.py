"""Core de textecho: dominio, servicios y configuración.

El Core no conoce Typer ni la terminal; solo el concepto de "invocación"
y cómo se convierte en una línea de salida.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
