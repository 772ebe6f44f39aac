from greenbook.adapters.storage.memory_store import MemoryFavStore

__all__ = ["MemoryFavStore"]
