from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd


@dataclass(frozen=True)
class CategorySeries:
    """Parallel label/value lists (line, bar, pie and radar charts)."""

    labels: List[Optional[str]] = field(default_factory=list)
    values: List[float] = field(default_factory=list)

    def as_dict(self) -> Dict[Optional[str], float]:
        return dict(zip(self.labels, self.values))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"label": self.labels, "value": self.values}, columns=["label", "value"])


@dataclass(frozen=True)
class PointSeries:
    """Ordered (x, y) pairs (scatter charts)."""

    points: List[Tuple[float, float]] = field(default_factory=list)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.points, columns=["x", "y"])


Series = Union[CategorySeries, PointSeries]
