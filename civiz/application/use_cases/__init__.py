from .vision import (
    SubmitVisionUseCase,
    LikeVisionUseCase,
    ListVisionsUseCase,
    GetVisionUseCase,
    GetTopVisionsByCategoryUseCase,
)
from .session import GetSessionUseCase, SetViewModeUseCase
from .funding import ListFundingCategoriesUseCase
from .street_view import FetchStreetViewUseCase

__all__ = [
    "SubmitVisionUseCase",
    "LikeVisionUseCase",
    "ListVisionsUseCase",
    "GetVisionUseCase",
    "GetTopVisionsByCategoryUseCase",
    "GetSessionUseCase",
    "SetViewModeUseCase",
    "ListFundingCategoriesUseCase",
    "FetchStreetViewUseCase",
]
