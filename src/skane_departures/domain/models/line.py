"""Line domain model."""

from dataclasses import dataclass
from enum import Enum


class Product(Enum):
    """Means of transport a line belongs to.

    ``NONE`` is used for line types the provider does not classify.
    """

    BUS = "bus"
    REGIONAL_TRAIN = "regional_train"
    ON_DEMAND = "on_demand"
    NONE = "none"


@dataclass(frozen=True)
class Line:
    """Represents a public transport line as shown to riders."""

    network: str
    product: Product
    label: str
    id: str | None = None
