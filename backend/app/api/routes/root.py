from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["root"])

@router.get("/", response_class=PlainTextResponse)
def hello():
    return "HELLO WORLD!"

@router.get("/json/gson")
def sample_json():
    return {"hello": "world"}
