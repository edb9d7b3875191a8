"""
Interpretation of boundary hole and line specifications.

A polygon's boundary is described per side by two flags: whether the side is
drawn at all and whether it carries a hole. Callers may give either flag set
sparsely, and the resolvers here turn that into dense boolean arrays of
length ``side_count``:

- ``None``: holes are chosen at random, lines default to every side
- a scalar bool: every side (True) or none (False)
- a collection of 1-based side indices: exactly those sides
- a boolean array of length ``side_count``: used as is
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from collections.abc import Set as AbstractSet
from typing import TYPE_CHECKING, Union

import numpy as np

from polymaze.utils.exceptions import InvalidArgumentError, ValidationError

if TYPE_CHECKING:
    from numpy.typing import NDArray

SideSelection = Union[None, bool, int, Sequence[int], AbstractSet[int], Sequence[bool], "NDArray"]


def _explicit_flags(explicit, side_count: int, parameter_name: str) -> NDArray:
    """Convert an explicit side selection into a boolean array."""
    if isinstance(explicit, (bool, np.bool_)):
        return np.full(side_count, bool(explicit))

    if isinstance(explicit, AbstractSet):
        try:
            explicit = sorted(explicit)
        except TypeError as e:
            raise ValidationError(
                parameter_name,
                explicit,
                reason="expected 1-based side indices or boolean flags",
                component_name="BoundarySpecResolver",
            ) from e

    values = np.atleast_1d(np.asarray(explicit))
    if values.size == 0:
        return np.zeros(side_count, dtype=bool)

    if values.dtype == np.bool_:
        if values.shape != (side_count,):
            raise InvalidArgumentError(
                parameter_name,
                explicit,
                reason=f"boolean flags must have exactly {side_count} entries, got {values.size}",
                component_name="BoundarySpecResolver",
            )
        return values.copy()

    if not np.issubdtype(values.dtype, np.integer) or values.ndim != 1:
        raise ValidationError(
            parameter_name,
            explicit,
            reason="expected 1-based side indices or boolean flags",
            component_name="BoundarySpecResolver",
        )

    if np.any(values < 1) or np.any(values > side_count):
        raise ValidationError(
            parameter_name,
            explicit,
            valid_range=(1, side_count),
            reason="side index out of range",
            component_name="BoundarySpecResolver",
        )

    flags = np.zeros(side_count, dtype=bool)
    flags[values - 1] = True
    return flags


def resolve_holes(
    explicit: SideSelection,
    requested_count: int | None,
    side_count: int,
    rng: np.random.Generator,
) -> NDArray:
    """
    Decide which boundary sides carry a hole.

    Args:
        explicit: Explicit selection, or None to choose at random
        requested_count: Number of random holes when ``explicit`` is None
            (None means no holes)
        side_count: Number of polygon sides
        rng: Random source for the random selection

    Returns:
        Boolean array of length ``side_count``

    Raises:
        ValidationError: Side index or hole count out of range
        InvalidArgumentError: Boolean flags of the wrong length
    """
    if explicit is not None:
        return _explicit_flags(explicit, side_count, "boundary_holes")

    count = 0 if requested_count is None else requested_count
    if (
        isinstance(count, bool)
        or not isinstance(count, numbers.Real)
        or not math.isfinite(count)
        or int(count) != count
        or not 0 <= count <= side_count
    ):
        raise ValidationError(
            "num_boundary_holes",
            requested_count,
            valid_range=(0, side_count),
            component_name="BoundarySpecResolver",
        )

    flags = np.zeros(side_count, dtype=bool)
    flags[rng.choice(side_count, size=int(count), replace=False)] = True
    return flags


def resolve_lines(explicit: SideSelection, side_count: int) -> NDArray:
    """
    Decide which boundary sides are drawn.

    Args:
        explicit: Explicit selection, or None for every side
        side_count: Number of polygon sides

    Returns:
        Boolean array of length ``side_count``
    """
    if explicit is None:
        return np.ones(side_count, dtype=bool)
    return _explicit_flags(explicit, side_count, "boundary_lines")
