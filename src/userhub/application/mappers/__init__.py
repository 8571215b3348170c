from userhub.application.mappers.user_mapper import to_user_dto

__all__ = ["to_user_dto"]
