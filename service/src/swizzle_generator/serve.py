import logging

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .errors import (
    AccessorCollision,
    InvalidIdentifier,
    MalformedSpec,
    TypeMismatch,
    UnknownField,
)
from .handler.generation import GenerationHandler
from .model.error import Error as ErrorModel
from .model.generation import (
    DeclarationKindList,
    GenerateInput,
    GenerateOutput,
    NormalizeInput,
)
from .model.swizzle import SwizzleSpec

logger = logging.getLogger(__name__)

origins = ["http://localhost:4200", "http://127.0.0.1:4200"]

app = FastAPI(title="Swizzle Generator")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _status_for(e: Exception) -> int:
    if isinstance(e, UnknownField):
        return 404
    if isinstance(e, TypeMismatch):
        return 422
    return 400


@app.get("/")
async def ping():
    return "pong"


@app.get("/swizzle/kinds", tags=["Swizzle"])
async def get_kinds() -> DeclarationKindList:
    return DeclarationKindList.from_enum()


@app.post(
    "/swizzle/normalize",
    tags=["Swizzle"],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorModel}},
)
async def post_normalize(
    input: NormalizeInput, response: Response
) -> SwizzleSpec | ErrorModel:
    """
    Returns the canonical model of a swizzle declaration
    """
    try:
        return GenerationHandler.normalize(input.declaration)

    except MalformedSpec as e:
        response.status_code = 400
        return ErrorModel.from_except(e)


@app.post(
    "/swizzle/accessors",
    tags=["Swizzle"],
    responses={400: {"model": ErrorModel}, 404: {"model": ErrorModel}, 422: {"model": ErrorModel}},
)
async def post_accessors(
    input: GenerateInput, response: Response
) -> GenerateOutput | ErrorModel:
    """
    Returns every accessor of the declaration in generation order

    The declaration is bound against the given shapes first, so unknown
    fields and type mismatches are reported before anything is generated.
    """
    try:
        return GenerationHandler.generate(input)

    except (MalformedSpec, UnknownField, TypeMismatch, InvalidIdentifier, AccessorCollision) as e:
        logger.info("Rejected swizzle request: %s", e)
        response.status_code = _status_for(e)
        return ErrorModel.from_except(e)


@app.post(
    "/swizzle/source",
    tags=["Swizzle"],
    response_class=PlainTextResponse,
    responses={400: {"model": ErrorModel}, 404: {"model": ErrorModel}, 422: {"model": ErrorModel}},
)
async def post_source(input: GenerateInput, response: Response):
    """
    Returns a Python module with the accessors as a mixin class
    """
    try:
        return PlainTextResponse(GenerationHandler.render_request(input))

    except (MalformedSpec, UnknownField, TypeMismatch, InvalidIdentifier, AccessorCollision) as e:
        logger.info("Rejected swizzle request: %s", e)
        return PlainTextResponse(
            ErrorModel.from_except(e).model_dump_json(),
            status_code=_status_for(e),
            media_type="application/json",
        )


def serve(host: str = "0.0.0.0", port: int = 8000):
    # Configure logging to show our application logs
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(levelname)s:%(name)s: %(message)s'
    )
    uvicorn.run(app, host=host, port=port, log_level="debug")


if __name__ == "__main__":
    serve()
