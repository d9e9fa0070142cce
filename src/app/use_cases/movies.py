from libs.result import Error, Result, Return


def normalize_movie_id(movie_id) -> Result[str]:
    """
    Movie ids are opaque strings from the external catalogue. Surrounding
    whitespace is dropped so one movie is never stored under two keys.
    """
    normalized = (movie_id or "").strip()
    if not normalized:
        return Return.err(Error("INVALID_MOVIE_ID", "Invalid movie ID"))
    return Return.ok(normalized)
