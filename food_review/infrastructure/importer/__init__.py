from .table_importer import TableImporter

__all__ = ["TableImporter"]
