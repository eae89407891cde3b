from .directory_source import DjangoDirectorySource

__all__ = ["DjangoDirectorySource"]
