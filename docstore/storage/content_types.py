"""Map stored file extensions to MIME types for serving."""

DEFAULT_CONTENT_TYPE = "application/octet-stream"

EXT_TO_CONTENT_TYPE: dict[str, str] = {
    ".pdf": "application/pdf",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".tiff": "image/tiff",
    ".tif": "image/tiff",
}


def content_type(filename: str) -> str:
    """Return the MIME type for filename's extension, or application/octet-stream."""
    ext = "." + filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return EXT_TO_CONTENT_TYPE.get(ext, DEFAULT_CONTENT_TYPE)
