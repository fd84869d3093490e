from fastapi import APIRouter, Depends, Response

from beercount.api.deps import get_store, parse_id, read_body
from beercount.schemas.batch import Batch, decode_batch
from beercount.services.store import Store

router = APIRouter(prefix="/batch", tags=["batches"])


@router.get("/{user}/all", response_model=list[Batch], name="batchList")
def list_batches(user: str, store: Store = Depends(get_store)) -> list[Batch]:
    return store.list_batches_by_user(user)


@router.post("", response_model=Batch, name="createBatch")
def create_batch(
    body: bytes = Depends(read_body),
    store: Store = Depends(get_store),
) -> Batch:
    batch = decode_batch(body)
    return store.insert_batch(batch.model_copy(update={"id": 0}))


@router.put("", response_model=Batch, name="updateBatch")
def update_batch(
    body: bytes = Depends(read_body),
    store: Store = Depends(get_store),
) -> Batch:
    batch = decode_batch(body)
    store.update_batch(batch)
    return batch


@router.get("/{batch_id}", response_model=Batch, name="getBatch")
def get_batch(batch_id: str, store: Store = Depends(get_store)) -> Batch:
    return store.get_batch(parse_id(batch_id))


@router.delete("/{batch_id}", name="deleteBatch")
def delete_batch(batch_id: str, store: Store = Depends(get_store)) -> Response:
    store.delete_batch(parse_id(batch_id))
    return Response(status_code=200)
