"""
Shared constants for vision imagery.

Placeholder images are shown while a vision's image is being generated and
remain in place when generation fails.
"""

PLACEHOLDER_IMAGE_URLS = (
    "https://images.unsplash.com/photo-1449034446853-66c86144b0ad?w=800&q=80",
    "https://images.unsplash.com/photo-1470071459604-3b5ec3a7fe05?w=800&q=80",
    "https://images.unsplash.com/photo-1447752875215-b2761acb3c5d?w=800&q=80",
    "https://images.unsplash.com/photo-1433086966358-54859d0ed716?w=800&q=80",
    "https://images.unsplash.com/photo-1501594907352-04cda38ebc29?w=800&q=80",
    "https://images.unsplash.com/photo-1540202404-1b927e27fa8b?w=800&q=80",
)

# Street View static image format returned to clients
STREET_VIEW_MIME = "image/jpeg"
