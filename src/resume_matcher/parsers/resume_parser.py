import re
from pathlib import Path

MAX_PDF_BYTES = 5 * 1024 * 1024
MIN_RESUME_CHARS = 50


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (PDF, TXT, MD) and return whitespace-normalized text."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        if path.stat().st_size > MAX_PDF_BYTES:
            raise ValueError("PDF must be under 5 MB.")
        text = normalize_text(_parse_pdf(path))
    elif suffix in (".txt", ".md"):
        text = normalize_text(path.read_text(encoding="utf-8"))
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")

    if len(text) < MIN_RESUME_CHARS:
        raise ValueError(
            "Could not extract readable text from the resume. "
            "Make sure it is not a scanned image - use a text-based PDF."
        )
    return text


def normalize_text(text: str) -> str:
    """Collapse all whitespace runs to single spaces before prompting."""
    return re.sub(r"\s+", " ", text).strip()


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    try:
        doc = fitz.open(str(path))
    except RuntimeError as e:  # fitz.FileDataError and friends
        raise ValueError("Failed to parse the PDF. Please use a valid, text-based PDF.") from e
    text = []
    for page in doc:
        text.append(page.get_text())
    doc.close()
    return "\n".join(text)
