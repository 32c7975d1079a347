"""Human-readable file sizes"""


UNITS = ["Bytes", "KB", "MB", "GB"]


def format_file_size(size: int) -> str:
    """Format a byte count, e.g. 2516582 -> '2.4 MB'. Zero is '0 Bytes'."""
    if size <= 0:
        return "0 Bytes"
    exp = 0
    while exp < len(UNITS) - 1 and size >= 1024 ** (exp + 1):
        exp += 1
    return f"{size / 1024 ** exp:.1f} {UNITS[exp]}"
