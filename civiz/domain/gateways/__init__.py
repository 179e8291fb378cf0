from .vision_generation_gateway import VisionGenerationGateway

__all__ = ["VisionGenerationGateway"]
