from typing import TypeAlias, Union, Sequence
import numpy as np
from numpy import ndarray
from numpy.typing import NDArray

ChannelArray: TypeAlias = NDArray[np.floating]

ArrayLike = Union[ndarray, Sequence[float], Sequence[Sequence[float]]]


def to_array(element: ArrayLike) -> ChannelArray:
    """
    Convert a color value, tuple or nested sequence to a float numpy array.

    Args:
        element: A color NamedTuple, a plain tuple/list, or an ndarray

    Returns:
        float64 array whose last axis holds the channels
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.asarray(element, dtype=np.float64)


def split_channels(arr: ndarray, expected: int) -> tuple[ndarray, ndarray | None]:
    """
    Split an array of shape (..., 3) or (..., 4) into base channels and alpha.

    Args:
        arr: Array whose last axis holds the channels
        expected: Number of non-alpha channels (3 for every supported space)

    Returns:
        (base, alpha) where alpha is None when the input has no alpha column
    """
    if arr.shape[-1] == expected:
        return arr, None
    if arr.shape[-1] == expected + 1:
        return arr[..., :expected], arr[..., expected]
    raise ValueError(
        f"expected last dimension to be {expected} or {expected + 1}, got shape {arr.shape}"
    )


def join_alpha(base: ndarray, alpha: ndarray | None) -> ndarray:
    if alpha is None:
        return base
    return np.concatenate([base, alpha[..., None]], axis=-1)
