"""Infrastructure layer: HTTP clients for image generation and street imagery."""
