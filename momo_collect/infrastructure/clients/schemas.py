"""Wire schemas for gateway responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CollectResponse(BaseModel):
    """Body returned by POST /collect/."""

    model_config = ConfigDict(extra="ignore")

    reference: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None


class TransactionStatusResponse(BaseModel):
    """Body returned by GET /transaction/{reference}/."""

    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = None
