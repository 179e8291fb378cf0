from .submit_vision import SubmitVisionUseCase
from .like_vision import LikeVisionUseCase
from .list_visions import ListVisionsUseCase
from .get_vision import GetVisionUseCase
from .get_top_visions import GetTopVisionsByCategoryUseCase

__all__ = [
    "SubmitVisionUseCase",
    "LikeVisionUseCase",
    "ListVisionsUseCase",
    "GetVisionUseCase",
    "GetTopVisionsByCategoryUseCase",
]
