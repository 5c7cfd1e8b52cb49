"""Scalar geometry kernels shared by every rectangle-backed entity."""

from typing import Any, Tuple

# the below ignores are due to `numba` constraints
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedFunctionDecorator=false
import numba  # type: ignore
import numpy as np


@numba.jit(nopython=True, cache=True)
def interval_overlap_numba(a0: float, a1: float, b0: float, b1: float) -> float:  # type: ignore
    """Length of the overlap of [a0, a1] and [b0, b1], clamped at zero."""
    return max(0.0, min(a1, b1) - max(a0, b0))


@numba.jit(nopython=True, cache=True)
def overlap_ratio_numba(
    top_1: float,
    left_1: float,
    width_1: float,
    height_1: float,
    top_2: float,
    left_2: float,
    width_2: float,
    height_2: float,
) -> float:  # type: ignore
    """Intersection over union of two rectangles, 0.0 when the union is empty."""
    intersection_width = interval_overlap_numba(
        left_1, left_1 + width_1, left_2, left_2 + width_2
    )
    intersection_height = interval_overlap_numba(
        top_1, top_1 + height_1, top_2, top_2 + height_2
    )
    intersection_area = intersection_width * intersection_height
    union_area = width_1 * height_1 + width_2 * height_2 - intersection_area
    if union_area <= 0.0:
        return 0.0
    return intersection_area / union_area


@numba.jit(nopython=True, cache=True)
def union_box_numba(
    top_1: float,
    left_1: float,
    width_1: float,
    height_1: float,
    top_2: float,
    left_2: float,
    width_2: float,
    height_2: float,
) -> Tuple[float, float, float, float]:  # type: ignore
    """Union bounding box as (top, left, width, height).

    Width and height are measured from the already-merged top/left.
    """
    top = float(min(top_1, top_2))
    left = float(min(left_1, left_2))
    width = float(max(left_1 + width_1, left_2 + width_2)) - left
    height = float(max(top_1 + height_1, top_2 + height_2)) - top
    return top, left, width, height


@numba.jit(nopython=True, cache=True)
def segments_intersect_numba(
    left_1: float,
    top_1: float,
    right_1: float,
    bottom_1: float,
    left_2: float,
    top_2: float,
    right_2: float,
    bottom_2: float,
) -> bool:  # type: ignore
    """2D segment intersection test (comp.graphics.algorithms FAQ).

    Both segments are parameterized over [0, 1); parallel or zero-length
    segments report no intersection.
    """
    denominator = (right_1 - left_1) * (bottom_2 - top_2) - (bottom_1 - top_1) * (
        right_2 - left_2
    )
    if denominator == 0.0:
        return False

    r = (
        (top_1 - top_2) * (right_2 - left_2) - (left_1 - left_2) * (bottom_2 - top_2)
    ) / denominator
    s = (
        (top_1 - top_2) * (right_1 - left_1) - (left_1 - left_2) * (bottom_1 - top_1)
    ) / denominator
    return r >= 0.0 and r < 1.0 and s >= 0.0 and s < 1.0


@numba.jit(nopython=True, cache=True)
def intersection_matrix_numba(
    first: np.ndarray[Any, np.dtype[np.float64]],
    second: np.ndarray[Any, np.dtype[np.float64]],
) -> np.ndarray[Any, np.dtype[np.bool_]]:  # type: ignore
    """Pairwise segment intersection for (n, 4) and (m, 4) edge arrays.

    Rows are (left, top, right, bottom).
    """
    n = first.shape[0]
    m = second.shape[0]
    result = np.zeros((n, m), dtype=np.bool_)
    for i in range(n):
        for j in range(m):
            result[i, j] = segments_intersect_numba(
                first[i, 0],
                first[i, 1],
                first[i, 2],
                first[i, 3],
                second[j, 0],
                second[j, 1],
                second[j, 2],
                second[j, 3],
            )
    return result


def edges_to_array(
    edges: "list[Tuple[float, float, float, float]]",
) -> np.ndarray[Any, np.dtype[np.float64]]:
    """Pack (left, top, right, bottom) tuples into a float64 array."""
    if not edges:
        return np.empty((0, 4), dtype=np.float64)
    return np.array(edges, dtype=np.float64)


__all__ = [
    "interval_overlap_numba",
    "overlap_ratio_numba",
    "union_box_numba",
    "segments_intersect_numba",
    "intersection_matrix_numba",
    "edges_to_array",
]
