from .vision_store import VisionStore, StoreEvent
from .sample_visions import build_sample_visions

__all__ = [
    "VisionStore",
    "StoreEvent",
    "build_sample_visions",
]
