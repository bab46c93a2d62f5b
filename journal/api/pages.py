"""Public pages: home listing and the static about/contact pages."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from journal.api.deps import CurrentSession, DbSession
from journal.api.rendering import render
from journal.services.posts import list_posts

router = APIRouter()

HOME_STARTING_CONTENT = (
    "Lacus vel facilisis volutpat est velit egestas dui id ornare. Semper auctor neque "
    "vitae tempus quam. Sit amet cursus sit amet dictum sit amet justo. Viverra tellus in "
    "hac habitasse. Imperdiet proin fermentum leo vel orci porta. Donec ultrices tincidunt "
    "arcu non sodales neque sodales ut. Mattis molestie a iaculis at erat pellentesque "
    "adipiscing. Magnis dis parturient montes nascetur ridiculus mus mauris vitae ultricies."
)
ABOUT_CONTENT = (
    "Hac habitasse platea dictumst vestibulum rhoncus est pellentesque. Dictumst vestibulum "
    "rhoncus est pellentesque elit ullamcorper. Non diam phasellus vestibulum lorem sed. "
    "Platea dictumst quisque sagittis purus sit. Egestas sed sed risus pretium quam "
    "vulputate dignissim suspendisse. Mauris in aliquam sem fringilla."
)
CONTACT_CONTENT = (
    "Scelerisque eleifend donec pretium vulputate sapien. Rhoncus urna neque viverra justo "
    "nec ultrices. Arcu dui vivamus arcu felis bibendum. Consectetur adipiscing elit duis "
    "tristique. Risus viverra adipiscing at in tellus integer feugiat."
)


@router.get("/", response_class=HTMLResponse)
def home(request: Request, db: DbSession, user: CurrentSession) -> HTMLResponse:
    """Every post in store order, each shown as a teaser."""
    return render(
        request,
        "home",
        user,
        starting_content=HOME_STARTING_CONTENT,
        posts=list_posts(db),
    )


@router.get("/about", response_class=HTMLResponse)
def about(request: Request, user: CurrentSession) -> HTMLResponse:
    return render(request, "about", user, about_content=ABOUT_CONTENT)


@router.get("/contact", response_class=HTMLResponse)
def contact(request: Request, user: CurrentSession) -> HTMLResponse:
    return render(request, "contact", user, contact_content=CONTACT_CONTENT)
