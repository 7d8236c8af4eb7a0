"""Capa CLI (Typer): parseo de argumentos y frontera de errores.

Puede importar de ``core``; ``core`` nunca importa de ``cli``.
"""
