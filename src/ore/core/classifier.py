"""File classification by extension."""

from types import MappingProxyType

OTHER = "Other"

FILE_TYPES = MappingProxyType(
    {
        "js": "JavaScript",
        "ts": "TypeScript",
        "jsx": "JavaScript JSX",
        "tsx": "TypeScript TSX",
        "json": "JSON",
        "css": "CSS",
        "html": "HTML",
        "md": "Markdown",
        "wasm": "WebAssembly",
        "png": "Image",
        "jpg": "Image",
        "jpeg": "Image",
        "gif": "Image",
        "svg": "Image",
        "ico": "Image",
        "woff": "Font",
        "woff2": "Font",
        "ttf": "Font",
        "eot": "Font",
        "map": "Source Map",
    }
)


def determine_file_type(extension: str | None) -> str:
    """Map an extension (no leading dot, case-sensitive) to a category label.

    Args:
        extension: File extension such as 'js', or None.

    Returns:
        Category label, 'Other' for anything unknown.
    """
    if extension is None:
        return OTHER
    return FILE_TYPES.get(extension, OTHER)


def extension_of(name: str) -> str | None:
    """Return the text after the last dot of a file name.

    Dotfiles without a further dot ('.bashrc') have no extension. A name
    ending in a dot has the empty extension.
    """
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension
