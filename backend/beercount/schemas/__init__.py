from beercount.schemas.batch import Batch, decode_batch
from beercount.schemas.beer import Beer, decode_beer

__all__ = [
    "Batch",
    "Beer",
    "decode_batch",
    "decode_beer",
]
