"""Entity: Product."""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A catalog product, used as stream and collector sample data."""

    id: int = Field(description="Product identifier")
    name: str = Field(description="Product name")
    price: float = Field(description="Unit price")
