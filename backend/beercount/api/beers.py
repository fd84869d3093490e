from fastapi import APIRouter, Depends, Response

from beercount.api.deps import get_store, parse_id, read_body
from beercount.schemas.beer import Beer, decode_beer
from beercount.services.store import Store

router = APIRouter(prefix="/beer", tags=["beers"])


@router.get("", response_model=list[Beer], name="beerList")
def list_beers(store: Store = Depends(get_store)) -> list[Beer]:
    return store.list_beers()


@router.post("", response_model=Beer, name="createBeer")
def create_beer(
    body: bytes = Depends(read_body),
    store: Store = Depends(get_store),
) -> Beer:
    beer = decode_beer(body)
    return store.insert_beer(beer.model_copy(update={"id": 0}))


@router.put("", response_model=Beer, name="updateBeer")
def update_beer(
    body: bytes = Depends(read_body),
    store: Store = Depends(get_store),
) -> Beer:
    beer = decode_beer(body)
    store.update_beer(beer)
    return beer


@router.get("/{beer_id}", response_model=Beer, name="getBeer")
def get_beer(beer_id: str, store: Store = Depends(get_store)) -> Beer:
    return store.get_beer(parse_id(beer_id))


@router.delete("/{beer_id}", name="deleteBeer")
def delete_beer(beer_id: str, store: Store = Depends(get_store)) -> Response:
    store.delete_beer(parse_id(beer_id))
    return Response(status_code=200)
