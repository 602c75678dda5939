"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las opciones (peticiones) y los DTO de respuesta (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni autenticación: solo la forma de los datos.
"""
