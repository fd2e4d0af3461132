"""Element property data read from a whitespace separated text file."""

from __future__ import annotations

import os
from itertools import islice


class PropertyFile:
    """Holds ``nprop`` values for each of ``nelem`` elements, read row by row."""

    def __init__(self, path: str | os.PathLike = "", nprop: int = 0, nelem: int = 0) -> None:
        self.path = path
        self.nprop = int(nprop)
        self.nelem = int(nelem)
        self.values = self._read()

    def _read(self) -> list[float]:
        count = self.nelem * self.nprop
        with open(self.path, encoding="utf-8") as handle:
            tokens = list(islice(handle.read().split(), count))
        values = []
        for token in tokens:
            try:
                values.append(float(token))
            except ValueError:
                break
        if len(values) < count:
            raise ValueError(f"premature end of property file {os.fspath(self.path)!r}")
        return values

    def data(self, elem_id: int, prop_num: int) -> float:
        """Value of property ``prop_num`` for element ``elem_id``."""
        if not 0 <= elem_id < self.nelem:
            raise IndexError(
                f"element {elem_id} greater than total number of block elements {self.nelem}"
            )
        if not 0 <= prop_num < self.nprop:
            raise IndexError(
                f"property number {prop_num} greater than total number of properties {self.nprop}"
            )
        return self.values[elem_id * self.nprop + prop_num]