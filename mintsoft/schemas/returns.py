"""
schemas/returns.py
------------------

Request body for ``POST /api/Return/{returnId}/AddItem``.

Callers work with snake_case attribute names; the API expects
PascalCase.  Field aliases carry the wire names and optional fields
that are not set are dropped on serialisation rather than sent as
``null``.  Values are passed through as given.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class ReturnItemPayload(BaseModel):
    product_id: Any = Field(alias="ProductId")
    quantity: Any = Field(alias="Quantity")
    reason_id: Any = Field(alias="ReasonId")
    unit_value: Any = Field(None, alias="UnitValue")
    notes: Any = Field(None, alias="Notes")

    model_config = {
        "populate_by_name": True  # allow population by field name or alias
    }

    def to_wire(self) -> Dict[str, Any]:
        """JSON body with the API's key names and no ``null`` entries."""
        return self.model_dump(by_alias=True, exclude_none=True)
