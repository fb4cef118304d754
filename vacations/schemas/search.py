from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    model_config = {"populate_by_name": True, "frozen": True}

    location: str = Field(min_length=1)
    check_in: str | None = Field(default=None, alias="checkIn")  # YYYY-MM-DD
    check_out: str | None = Field(default=None, alias="checkOut")  # YYYY-MM-DD
    adults: int = 1
    children: int = 0
    infants: int = 0
    pets: int = 0
    min_price: int | float | None = Field(default=None, alias="minPrice")
    max_price: int | float | None = Field(default=None, alias="maxPrice")
    page: int = 1  # 1-based


class Listing(BaseModel):
    title: str
    url: str  # canonical: absolute, no query string
    price: str | None = None  # raw display text, e.g. "$120 night"
    rating: str | None = None  # raw text or aria-label
    description: str | None = None  # reserved


class SearchResponse(BaseModel):
    total: int
    listings: list[Listing]
