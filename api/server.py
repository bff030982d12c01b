"""FastAPI server exposing single-operation evaluation."""

from __future__ import annotations

import logging
from typing import Annotated, Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from twiddle.constants import WIDTHS, mask_for, to_signed32, to_signed64
from twiddle.family import OPERATION_ARGS, WORD_RESULTS, apply

logger = logging.getLogger(__name__)


# Words are 32 or 64 bits; accept either the signed or the unsigned view.
WordArg = Annotated[int, Field(ge=-(1 << 63), le=(1 << 64) - 1)]


class EvaluateRequest(BaseModel):
    operation: str = Field(min_length=1, max_length=32)
    width: Literal[32, 64] = Field(default=32)
    args: list[WordArg] = Field(default_factory=list, max_length=4)


app = FastAPI(title="Twiddle API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _evaluate(payload: EvaluateRequest) -> int:
    try:
        return apply(payload.width, payload.operation, payload.args)
    except ValueError as exc:
        logger.info("rejected %s/%s: %s", payload.operation, payload.width, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _result_payload(payload: EvaluateRequest, result: int) -> dict:
    response = {
        "operation": payload.operation,
        "width": payload.width,
        "args": payload.args,
        "result": result,
        "hex": None,
        "signed": None,
    }
    if payload.operation in WORD_RESULTS:
        pattern = result & mask_for(payload.width)
        response["hex"] = f"0x{pattern:0{payload.width // 4}x}"
        response["signed"] = to_signed32(pattern) if payload.width == 32 else to_signed64(pattern)
    return response


@app.get("/")
def root() -> dict:
    return {"status": "ok", "widths": list(WIDTHS), "operations": len(OPERATION_ARGS)}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/operations")
def operations() -> dict:
    return {
        "widths": list(WIDTHS),
        "operations": [
            {"name": name, "args": list(arg_names), "word_result": name in WORD_RESULTS}
            for name, arg_names in OPERATION_ARGS.items()
        ],
    }


@app.post("/evaluate")
def evaluate(payload: EvaluateRequest) -> dict:
    result = _evaluate(payload)
    return _result_payload(payload, result)
