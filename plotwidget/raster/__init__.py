from .canvas import clip_box, draw_hline, draw_vline, new_canvas
from .draw_fills import draw_circle, draw_rect
from .draw_lines import draw_polyline, draw_segment
from .draw_text import draw_text, text_size
from .painter import paint, paint_to_rgba

__all__ = [
    "clip_box",
    "draw_circle",
    "draw_hline",
    "draw_polyline",
    "draw_rect",
    "draw_segment",
    "draw_text",
    "draw_vline",
    "new_canvas",
    "paint",
    "paint_to_rgba",
    "text_size",
]
