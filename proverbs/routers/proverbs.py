from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel, ConfigDict, StrictStr, model_validator

from proverbs.domain.proverbs import SCALAR_TYPES
from proverbs.services.proverb_store import ProverbNotFoundError, ProverbStore

router = APIRouter(prefix="/proverbs", tags=["proverbs"])


class ProverbPayload(BaseModel):
    """Body of create/update requests. Unknown scalar fields are kept."""

    model_config = ConfigDict(extra="allow")

    text: StrictStr

    @model_validator(mode="after")
    def check_scalar_extras(self) -> "ProverbPayload":
        for key, value in (self.model_extra or {}).items():
            if key != "id" and not isinstance(value, SCALAR_TYPES):
                raise ValueError(f"field {key!r} must be a scalar")
        return self

    def extra_fields(self) -> dict[str, Any]:
        # the store assigns identifiers, a client-supplied id is ignored
        return {k: v for k, v in (self.model_extra or {}).items() if k != "id"}


def _get_store(request: Request) -> ProverbStore:
    store = getattr(getattr(request.app, "state", None), "store", None)
    if store is None:
        raise RuntimeError("ProverbStore not configured")
    return store


@router.post("", status_code=201)
def create_proverb(payload: ProverbPayload, request: Request):
    store = _get_store(request)
    return store.create(payload.text, payload.extra_fields()).to_dict()


@router.get("")
def list_proverbs(request: Request):
    store = _get_store(request)
    return [p.to_dict() for p in store.list()]


@router.get("/{proverb_id:int}")
def get_proverb(proverb_id: int, request: Request):
    store = _get_store(request)
    try:
        return store.get(proverb_id).to_dict()
    except ProverbNotFoundError as exc:
        raise HTTPException(404, str(exc))


@router.put("/{proverb_id:int}")
def update_proverb(proverb_id: int, payload: ProverbPayload, request: Request):
    store = _get_store(request)
    try:
        return store.update(proverb_id, payload.text, payload.extra_fields()).to_dict()
    except ProverbNotFoundError as exc:
        raise HTTPException(404, str(exc))


@router.delete("/{proverb_id:int}", status_code=204)
def delete_proverb(proverb_id: int, request: Request) -> Response:
    store = _get_store(request)
    try:
        store.delete(proverb_id)
    except ProverbNotFoundError as exc:
        raise HTTPException(404, str(exc))
    return Response(status_code=204)


# Registered after the typed routes: only segments that are not digits land here.
@router.get("/{raw_id}")
@router.put("/{raw_id}")
def invalid_proverb_id(raw_id: str):
    raise HTTPException(400, f"Invalid proverb id: {raw_id!r}")


@router.delete("/{raw_id}")
def unknown_proverb_path(raw_id: str):
    # same answer as an unmatched route, otherwise the path match above yields 405
    raise HTTPException(404, "Not Found")
