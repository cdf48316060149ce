"""Reverse service models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EchoRequest(BaseModel):
    """Body of a `POST /user` request."""

    model_config = ConfigDict(extra="ignore")

    first_name: str = ""
