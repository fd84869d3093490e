from beercount.models.batch import BatchRow
from beercount.models.beer import BeerRow

__all__ = [
    "BatchRow",
    "BeerRow",
]
