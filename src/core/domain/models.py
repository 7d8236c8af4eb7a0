"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación en el borde: una invocación sin texto no llega a construirse.
- `repr` legible para el log de diagnóstico sin escribir código extra.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class InvocationArgs(BaseModel):
    """Argumentos de una única ejecución de la herramienta.

    Se construye al arrancar a partir de la línea de comandos, se consume
    una vez y se descarta al salir.
    """

    model_config = ConfigDict(frozen=True)

    text: list[str] = Field(
        ...,
        min_length=1,
        description="Tokens de texto en el orden recibido (se conservan tal cual).",
    )
    omit_newline: bool = Field(
        default=False,
        description="Si es True no se imprime el salto de línea final.",
    )
