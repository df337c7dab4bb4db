from fastapi import Request

from src.adapters.memory_store import InMemoryCategoryStore


# --- Store ---
def get_category_store(request: Request) -> InMemoryCategoryStore:
    """Return the store owned by the running application."""
    store: InMemoryCategoryStore = request.app.state.category_store
    return store


# --- Request body ---
async def read_raw_body(request: Request) -> bytes:
    """Hand the undecoded body to sync routes so they control when decoding happens."""
    return await request.body()
