from profile_css.storage.filesystem import FileSystemStorage
from profile_css.storage.memory import InMemoryStorage

__all__ = [
    "FileSystemStorage",
    "InMemoryStorage",
]
