"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce la CLI ni el sistema de ficheros: solo mods y entradas.
"""
