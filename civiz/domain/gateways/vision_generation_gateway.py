from abc import ABC, abstractmethod

from ..models.generation import GenerationResult


class VisionGenerationGateway(ABC):
    """Gateway interface - defines contract for generating a vision image"""
    
    @abstractmethod
    async def generate(self, address: str, prompt: str) -> GenerationResult:
        """
        Generate an image of the vision at the given address.
        
        May take arbitrarily long. Implementations report provider failures
        as GenerationResult.failure; any exception raised is treated by
        callers as an unknown failure.
        """
        pass
