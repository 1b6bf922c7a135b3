from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from shortlink_app.services.url_service import URLService
from shortlink_app.dependencies import get_url_service
from shortlink_app.storage.errors import URLNotFoundError

router = APIRouter(tags=["redirect"])


@router.get("/{alias}")
def redirect_to_url(
    alias: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the URL saved under the alias.
    
    Sync route: FastAPI runs it in its threadpool, so concurrent
    redirects hit the shared storage from several threads.
    """
    try:
        url = url_service.resolve_url(alias)
    except URLNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="not found"
        )
    
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
