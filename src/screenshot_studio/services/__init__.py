"""Services for exporting rendered slides."""

from .export import (
    ExportedImage,
    archive_filename,
    export_all,
    export_single,
    save_images,
    slide_filename,
    write_archive,
)

__all__ = [
    "ExportedImage",
    "archive_filename",
    "export_all",
    "export_single",
    "save_images",
    "slide_filename",
    "write_archive",
]
