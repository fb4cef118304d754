from vacations.schemas.search import Listing

NOT_AVAILABLE = "N/A"
NO_RESULTS_MESSAGE = (
    "No listings found for the specified criteria. "
    "Try adjusting your search parameters."
)


def format_listing(index: int, listing: Listing) -> str:
    return (
        f"{index}. {listing.title}\n"
        f"   URL: {listing.url}\n"
        f"   Price: {listing.price or NOT_AVAILABLE}\n"
        f"   Rating: {listing.rating or NOT_AVAILABLE}\n"
    )


def format_listings(listings: list[Listing]) -> str:
    """Numbered, human-readable listing summary with a count header."""
    if not listings:
        return NO_RESULTS_MESSAGE
    body = "\n".join(format_listing(i, listing) for i, listing in enumerate(listings, 1))
    return f"Found {len(listings)} listings:\n\n{body}"


def format_error(message: str) -> str:
    return f"Error searching Airbnb: {message}"
