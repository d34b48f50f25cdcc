"""Expected-version handling for partial updates."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Response, status


def get_expected_version(
    if_match: Annotated[str | None, Header(alias="If-Match")] = None,
) -> int | None:
    """Parse the `If-Match` header into the version the client last read.

    Accepts a bare integer or an entity tag such as `"3"` or `W/"3"`.
    Absent header means the client does not care.
    """
    if if_match is None:
        return None

    tag = if_match.strip().removeprefix("W/").strip('"')
    try:
        return int(tag)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="If-Match must carry an integer version",
        ) from e


ExpectedVersion = Annotated[int | None, Depends(get_expected_version)]


def set_etag(response: Response, version: int) -> None:
    response.headers["ETag"] = f'"{version}"'
