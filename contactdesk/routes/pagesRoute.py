from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from contactdesk.commonUtils.exceptions import RetrievalError
from contactdesk.crud.listingService import ListingService
from contactdesk.dependencies.contactDependencies import get_listing_service

router = APIRouter()

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates" / "pages")


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def contact_form_page(request: Request):
    return templates.TemplateResponse(request, "contact_form.html", {"api_url": "/api/contactFormData"})


@router.get("/submissions", response_class=HTMLResponse, include_in_schema=False)
async def submissions_page(request: Request, listing: ListingService = Depends(get_listing_service)):
    """Server-rendered list of submissions, with an error panel when the store can't be read"""
    try:
        submissions = await listing.list()
    except RetrievalError as e:
        return templates.TemplateResponse(
            request,
            "submissions.html",
            {"submissions": [], "error": e.public_message},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return templates.TemplateResponse(request, "submissions.html", {"submissions": submissions, "error": None})
