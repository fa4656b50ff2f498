"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y los textos.
- El dominio no conoce HTTP ni CLI: solo empleados y mensajes.
"""
