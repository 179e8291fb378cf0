from .list_funding_categories import ListFundingCategoriesUseCase

__all__ = ["ListFundingCategoriesUseCase"]
