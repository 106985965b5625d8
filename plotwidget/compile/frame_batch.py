from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

import numpy as np
import torch

from plotwidget.geometry import Rect


@dataclass(frozen=True)
class FullRewrite:
    tensor_h_w_4: torch.Tensor


@dataclass(frozen=True)
class ReplaceRect:
    x: int
    y: int
    width: int
    height: int
    rect_h_w_4: torch.Tensor


WriteOp: TypeAlias = FullRewrite | ReplaceRect


@dataclass(frozen=True)
class WriteBatch:
    """Ordered frame-buffer writes handed to the host window matrix."""

    operations: list[WriteOp]


def _check_rgba(frame_rgba: np.ndarray) -> None:
    if frame_rgba.dtype != np.uint8:
        raise ValueError("frame_rgba must be uint8")
    if frame_rgba.ndim != 3 or frame_rgba.shape[2] != 4:
        raise ValueError("frame_rgba must have shape (H, W, 4)")


def compile_full_rewrite_batch(frame_rgba: np.ndarray) -> WriteBatch:
    _check_rgba(frame_rgba)
    tensor = torch.from_numpy(np.ascontiguousarray(frame_rgba))
    return WriteBatch([FullRewrite(tensor)])


def compile_plot_rect_batch(frame_rgba: np.ndarray, rect: Rect) -> WriteBatch:
    """Only the pixels under the plot's allocated rect, for partial redraws."""
    _check_rgba(frame_rgba)
    if not rect.is_finite():
        raise ValueError("rect must be finite")
    height, width, _ = frame_rgba.shape
    x = max(0, int(np.floor(rect.min_x)))
    y = max(0, int(np.floor(rect.min_y)))
    x1 = min(width, int(np.ceil(rect.max_x)))
    y1 = min(height, int(np.ceil(rect.max_y)))
    if x1 <= x or y1 <= y:
        raise ValueError("rect does not overlap the frame")
    patch = torch.from_numpy(np.ascontiguousarray(frame_rgba[y:y1, x:x1]))
    return WriteBatch([ReplaceRect(x=x, y=y, width=x1 - x, height=y1 - y, rect_h_w_4=patch)])
