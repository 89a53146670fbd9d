from pathlib import Path
import structlog

log = structlog.get_logger(__name__)
utf8_bom = b"\xef\xbb\xbf"

def strip_utf8_bom(data: bytes) -> bytes:
    # removes the utf-8 byte order mark from byte data if present.
    if data.startswith(utf8_bom):
        return data[len(utf8_bom):]
    return data

def read_text_file(file_path: Path) -> str:
    # reads a text file as utf-8, dropping a leading bom. os errors propagate.
    return strip_utf8_bom(file_path.read_bytes()).decode("utf-8", errors="replace")

def relative_label(file_path: Path, root: Path) -> str:
    # root-relative posix path with the final extension removed.
    return file_path.relative_to(root).with_suffix("").as_posix()
