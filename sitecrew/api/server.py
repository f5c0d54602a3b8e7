"""HTTP boundary — POST a website request, get the discussion and the generated code back."""

import sys
from typing import Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, Field

from sitecrew.config import get_config
from sitecrew.errors import ValidationError
from sitecrew.graph import Orchestrator, get_orchestrator

router = APIRouter(tags=["Generation"])


class GenerateRequest(BaseModel):
    # "prompt" is the field name older clients send.
    goal: Optional[str] = Field(default=None, validation_alias=AliasChoices("goal", "prompt"))
    references: Optional[list[str]] = None


class Contribution(BaseModel):
    agent: str
    message: str


class GenerateResponse(BaseModel):
    discussion: list[Contribution]
    code: str


@router.post("/generate-website", response_model=GenerateResponse)
def generate_website(
    payload: GenerateRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator),
):
    try:
        result = orchestrator.run(payload.goal, payload.references)
    except ValidationError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    except Exception as exc:
        print(f"[SiteCrew] Error in generate-website: {exc!r}", file=sys.stderr)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Unknown error"})

    return result.to_dict()


@router.get("/health")
def health():
    return {"status": "ok"}


def create_app() -> FastAPI:
    app = FastAPI(title="SiteCrew API", version="0.1.0")

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(Exception)
    async def _internal_failure(request: Request, exc: Exception):
        print(f"[SiteCrew] Unhandled error: {exc!r}", file=sys.stderr)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Unknown error"})

    app.include_router(router)
    app.include_router(router, prefix="/api")

    # Public generation endpoint: any origin may call it.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()


def main() -> None:
    """Server entry point — serves the API with uvicorn."""
    config = get_config()
    uvicorn.run(
        app,
        host=config.get("server_host", "0.0.0.0"),
        port=int(config.get("server_port", 8000)),
    )


if __name__ == "__main__":
    main()
