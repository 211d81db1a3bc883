import logging
from collections.abc import Iterator
from pathlib import Path

from herbafric.schemas import Extraction

DOCUMENT_SUFFIXES = (".txt", ".md")


def read_document(path: Path) -> str:
    """Read a document as UTF-8, tolerating a byte-order mark."""
    return Path(path).read_text(encoding="utf-8-sig")


def iter_documents(src: Path) -> Iterator[tuple[Path, str]]:
    """
    Yield (path, text) for a single file or every .txt/.md file in a directory.

    Unreadable files inside a directory are logged and skipped; a missing
    single-file source raises.
    """
    src = Path(src)
    if not src.is_dir():
        yield src, read_document(src)
        return

    paths = sorted(p for p in src.iterdir() if p.suffix.lower() in DOCUMENT_SUFFIXES)
    if not paths:
        logging.warning(f"No {'/'.join(DOCUMENT_SUFFIXES)} files found in {src}")
    for path in paths:
        try:
            text = read_document(path)
        except (OSError, UnicodeDecodeError) as e:
            logging.warning(f"Could not read {path}: {e}")
            continue
        yield path, text


def load_records(path: Path) -> Extraction:
    """
    Load a `{"diseases": [...]}` collection written by `export_json`.

    >>> import tempfile, os
    >>> t = tempfile.NamedTemporaryFile(delete=False, mode="wb", suffix=".json")
    >>> _ = t.write('{"diseases":[{"name":"Cough","herbs":[{"name":"Ginger"}]}]}'.encode())
    >>> t.close()
    >>> load_records(Path(t.name)).diseases[0].herbs[0].native_names is None
    True
    >>> os.unlink(t.name)
    """
    with open(path, "rb") as f:
        return Extraction.from_json(f.read())
