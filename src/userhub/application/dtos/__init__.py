"""Data Transfer Objects for presentation layer.

DTOs decouple the presentation layer from domain models and never
carry the user's password.
"""

from userhub.application.dtos.user_dto import UserDTO

__all__ = ["UserDTO"]
