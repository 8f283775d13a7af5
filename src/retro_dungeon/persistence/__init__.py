from .save_file import SaveRecord, read_save, write_save

__all__ = ["SaveRecord", "read_save", "write_save"]
