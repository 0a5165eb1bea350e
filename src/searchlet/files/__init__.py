"""Output file operations."""

from searchlet.files.ops import CONFIG_FILE, INDEX_FILE, WrittenFiles, write_output

__all__ = ["CONFIG_FILE", "INDEX_FILE", "WrittenFiles", "write_output"]
