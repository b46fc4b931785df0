import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Query, Request, Response, status
from fastapi.responses import HTMLResponse

from app.config import settings
from app.dependencies import close_clients, get_lookup_controller
from app.models import KeyEvent, LookupRequest, ViewState
from app.rendering import templates
from app.services.lookup_controller import LookupController

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.basicConfig(level=logging.getLevelName(settings.log_level.upper()), format=LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Looking up Pokemon on {settings.pokeapi_base_url}")
    yield
    # Close the shared PokeAPI connection pool on shutdown
    await close_clients()


app = FastAPI(
    title="Pokedex Lookup",
    description="Looks up a single Pokemon on PokeAPI and renders it with the raw response.",
    lifespan=lifespan,
)


def render_page(request: Request, view: ViewState, input_value: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"view": view, "input_value": input_value},
    )


# Page: input field, search button and the three output regions
@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(
    request: Request,
    controller: LookupController = Depends(get_lookup_controller),
):
    return render_page(request, controller.view, controller.input_value)


# Page form submission (button or Enter in the input field)
@app.get("/search", response_class=HTMLResponse, include_in_schema=False)
async def search(
    request: Request,
    pokemon_name: str = Query("", alias="pokemonName"),
    controller: LookupController = Depends(get_lookup_controller),
):
    # Render this request's own outcome, even if a newer lookup has since taken over the shared page
    view = await controller.lookup(pokemon_name)
    return render_page(request, view, pokemon_name)


@app.get("/api/view", response_model=ViewState, summary="Returns the current output regions")
async def get_view(controller: LookupController = Depends(get_lookup_controller)):
    return controller.view


@app.post("/api/lookup", response_model=ViewState, summary="Looks up a Pokemon by name or ID")
async def lookup(
    body: LookupRequest,
    controller: LookupController = Depends(get_lookup_controller),
):
    """Fills the input field with the query and submits it. Failures are rendered, not raised."""
    return await controller.lookup(body.query)


@app.post("/api/input", status_code=status.HTTP_204_NO_CONTENT, summary="Writes the input field")
async def set_input(
    body: LookupRequest,
    controller: LookupController = Depends(get_lookup_controller),
):
    controller.set_input(body.query)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/api/submit", response_model=ViewState, summary="Submits the current input field")
async def submit(controller: LookupController = Depends(get_lookup_controller)):
    return await controller.submit()


@app.post("/api/keypress", response_model=None, summary="Submits when the key is Enter")
async def keypress(
    event: KeyEvent,
    controller: LookupController = Depends(get_lookup_controller),
):
    """Any key other than Enter is ignored and leaves the page untouched."""
    if event.query is not None:
        controller.set_input(event.query)
    view = await controller.handle_key(event)
    if view is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return view


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
