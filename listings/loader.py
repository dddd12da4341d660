def read_html(path: str) -> str:
    """Read a saved listing page. Undecodable bytes become U+FFFD instead of aborting the run."""
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        return fh.read()
