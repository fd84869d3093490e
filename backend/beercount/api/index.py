from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["index"])


@router.get("/", response_class=PlainTextResponse, name="index")
def index() -> str:
    return "hello world!"
