from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def root():
    return "Edolog backend running"


@router.get("/health")
@router.get("/api/health")
def health():
    return {"status": "ok"}
