from fastapi import APIRouter, Depends, HTTPException, Response, status
from shortlink_app.config import Settings
from shortlink_app.schemas.url import SaveURLRequest, SaveURLResponse
from shortlink_app.services.url_service import URLService
from shortlink_app.dependencies import get_settings, get_url_service
from shortlink_app.storage.errors import AliasExistsError

router = APIRouter(prefix="/url", tags=["urls"])


@router.post("", response_model=SaveURLResponse, status_code=status.HTTP_201_CREATED)
def save_url(
    body: SaveURLRequest,
    url_service: URLService = Depends(get_url_service),
    settings: Settings = Depends(get_settings)
):
    """Save a URL under a custom or generated alias"""
    try:
        saved = url_service.save_url(body.url, body.alias)
    except AliasExistsError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="alias already exists"
        )
    return SaveURLResponse(
        id=saved.id,
        alias=saved.alias,
        url=saved.url,
        short_url=f"{settings.base_url.rstrip('/')}/{saved.alias}",
    )


@router.delete("/{alias}", status_code=status.HTTP_204_NO_CONTENT)
def delete_url(
    alias: str,
    url_service: URLService = Depends(get_url_service)
):
    """Delete an alias (no error if it does not exist)"""
    url_service.delete_url(alias)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
