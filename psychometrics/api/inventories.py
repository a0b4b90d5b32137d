"""
LLM Psychometrics — Inventories API

Read-only access to the item banks administered to models.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from psychometrics.item_banks import INVENTORY_KEYS, get_items
from psychometrics.schemas.run import InventoryItemsResponse

router = APIRouter()


@router.get(
    "",
    summary="List available inventory keys",
)
async def list_inventories() -> dict:
    return {"inventories": list(INVENTORY_KEYS)}


@router.get(
    "/{inventory}/items",
    response_model=InventoryItemsResponse,
    summary="List the items of one inventory",
)
async def list_inventory_items(inventory: str) -> InventoryItemsResponse:
    try:
        items = get_items(inventory)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown inventory '{inventory}'.",
        )
    return InventoryItemsResponse(inventory=inventory, count=len(items), items=items)
