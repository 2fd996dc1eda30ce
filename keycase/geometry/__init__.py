from .polygon import (
    validate_outline,
    rect_inside_polygon,
)
