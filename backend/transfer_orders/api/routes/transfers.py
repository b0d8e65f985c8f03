"""Transfer Routes — REST surface for the /transfer resource.

Invariants:
    - Routes translate HTTP <-> service calls, no business logic here
    - Not-found answers are 404 with an empty body (never an error envelope)
    - PUT/PATCH answer 200 when the id existed before the call, 201 otherwise
    - DELETE answers 204 once per existing id, 404 afterwards

Design Decisions:
    - Existence for PUT/PATCH is sampled before the update (same race window as the
      service's check-then-act; last writer wins)
    - Collection-wide PUT/PATCH/DELETE deliberately unsupported
    - Listing sorted by id: the store snapshot is a set, clients want stable output
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from transfer_orders.api.dependencies import get_transfer_service
from transfer_orders.core.domain_types import MAX_TRANSFER_ID
from transfer_orders.schemas.transfer import TransferOrderSchema
from transfer_orders.services.transfer_service import TransferService

router = APIRouter(prefix="/api/v1/transfer", tags=["transfer"])

SUPPORTED_METHODS = "GET,POST,PUT,DELETE,PATCH,OPTIONS,HEAD"

TransferIdPath = Annotated[int, Path(ge=0, le=MAX_TRANSFER_ID)]


@router.get("", response_model=list[TransferOrderSchema])
async def list_transfers(
    service: TransferService = Depends(get_transfer_service),
):
    """All stored transfer orders. Empty list, never 404."""
    orders = sorted(service.get_transfers(), key=lambda o: o.id)
    return [TransferOrderSchema.from_domain(o) for o in orders]


@router.get("/{transfer_id}", response_model=TransferOrderSchema)
async def get_transfer(
    transfer_id: TransferIdPath,
    service: TransferService = Depends(get_transfer_service),
):
    order = service.get_transfer(transfer_id)
    if order is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return TransferOrderSchema.from_domain(order)


@router.post(
    "", response_model=TransferOrderSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_transfer(
    body: TransferOrderSchema,
    service: TransferService = Depends(get_transfer_service),
):
    """Create a transfer. The payload id is kept only if it is free."""
    order = service.new_transfer(body.to_domain())
    return TransferOrderSchema.from_domain(order)


@router.put("/{transfer_id}", response_model=TransferOrderSchema)
async def replace_transfer(
    transfer_id: TransferIdPath,
    body: TransferOrderSchema,
    response: Response,
    service: TransferService = Depends(get_transfer_service),
):
    """Full replace-or-create. Fields absent from the body are cleared."""
    existed = service.does_transfer_exist(transfer_id)
    order = service.update_transfer(transfer_id, body.to_domain())
    response.status_code = _upsert_status(existed)
    return TransferOrderSchema.from_domain(order)


@router.patch("/{transfer_id}", response_model=TransferOrderSchema)
async def patch_transfer(
    transfer_id: TransferIdPath,
    body: TransferOrderSchema,
    response: Response,
    service: TransferService = Depends(get_transfer_service),
):
    """Partial merge-or-create. Fields absent from the body are kept."""
    existed = service.does_transfer_exist(transfer_id)
    order = service.update_transfer_partially(transfer_id, body.to_domain())
    response.status_code = _upsert_status(existed)
    return TransferOrderSchema.from_domain(order)


@router.delete("/{transfer_id}")
async def delete_transfer(
    transfer_id: TransferIdPath,
    service: TransferService = Depends(get_transfer_service),
):
    deleted = service.delete_transfer(transfer_id)
    return Response(
        status_code=(
            status.HTTP_204_NO_CONTENT if deleted
            else status.HTTP_404_NOT_FOUND
        ),
    )


@router.options("")
async def transfer_options():
    return Response(
        status_code=status.HTTP_200_OK,
        headers={"Allow": SUPPORTED_METHODS},
    )


@router.head("")
async def transfer_head():
    return Response(status_code=status.HTTP_200_OK)


def _upsert_status(existed: bool) -> int:
    return status.HTTP_200_OK if existed else status.HTTP_201_CREATED
