"""Result header domain model."""

from pydantic import BaseModel, ConfigDict


class ResultHeader(BaseModel):
    """Identifies the network and server that produced a result."""

    model_config = ConfigDict(frozen=True)

    network: str
    server_product: str
