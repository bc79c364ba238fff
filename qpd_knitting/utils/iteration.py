# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Iteration utilities."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")

# Certain calls to `zip` should be strict, but the `strict` kwarg was not added
# until Python 3.10.
if sys.version_info >= (3, 10, 0):  # pragma: no cover

    def strict_zip(*args, **kwargs):
        """Equivalent to ``zip([...], strict=True)`` where supported."""
        return zip(*args, strict=True, **kwargs)

else:  # pragma: no cover
    strict_zip = zip  # type: ignore


def ordered_map(
    func: Callable[[T], R],
    iterable: Iterable[T],
    /,
    *,
    max_workers: int | None = None,
) -> list[R]:
    """Apply ``func`` to every item, returning the results in input order.

    If ``max_workers`` is ``None`` or ``1``, the items are processed serially.
    Otherwise they are dispatched to a thread pool of that size.  Each call
    receives only its own item, so the result list is identical to the
    serial one regardless of the order in which the workers finish.

    >>> ordered_map(lambda x: x * x, range(4), max_workers=2)
    [0, 1, 4, 9]

    Raises:
        ValueError: ``max_workers`` is less than 1.
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be at least 1 (got {max_workers}).")
    if max_workers is None or max_workers == 1:
        return [func(item) for item in iterable]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(func, iterable))
