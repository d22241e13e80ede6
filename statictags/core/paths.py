"""
Asset reference resolution.
Turns a bare asset name into an application-relative path using the folder and
extension conventions of its tag type. Never touches the filesystem.
"""
from typing import Optional


def resolve_path(source: str, folder: str, extension: Optional[str] = None) -> str:
    """
    Resolve an asset reference to its canonical path.

    Args:
        source: Absolute path (e.g. "/images/logo.png") or bare name (e.g. "logo.png")
        folder: Conventional folder for bare names (e.g. "images")
        extension: Optional extension appended to bare names, without the dot

    Returns:
        The source unchanged when it starts with "/", otherwise
        "<folder>/<source>[.<extension>]"

    Example:
        resolve_path("app", "stylesheets", "css") -> "stylesheets/app.css"
    """
    if source.startswith("/"):
        return source

    suffix = f".{extension}" if extension else ""
    return f"{folder}/{source}{suffix}"
