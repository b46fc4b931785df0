"""Turns a decoded Pokemon record into the markup and text shown on the lookup page."""
import json
from pathlib import Path

from fastapi.templating import Jinja2Templates

from app.models import PokemonRecord, PokemonSummary

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

MOVES_SHOWN = 5
LIST_SEPARATOR = ", "

LOADING_DETAIL = (
    '<div class="spinner-border" role="status">'
    '<span class="visually-hidden">Loading...</span></div>'
)
LOADING_RAW = "Loading..."
NO_DATA = "No data available."


def format_measure(value: int) -> str:
    """Converts decimetres/hectograms to metres/kilograms (divide by 10).

    Whole results print without a trailing ``.0`` (60 -> "6", 4 -> "0.4").
    """
    converted = value / 10
    if converted.is_integer():
        return str(int(converted))
    return str(converted)


def display_name(name: str) -> str:
    return name[:1].upper() + name[1:]


def summarize(record: PokemonRecord) -> PokemonSummary:
    abilities = LIST_SEPARATOR.join(entry.ability.name for entry in record.abilities)
    stats = LIST_SEPARATOR.join(f"{entry.stat.name}: {entry.base_stat}" for entry in record.stats)
    moves = LIST_SEPARATOR.join(entry.move.name for entry in record.moves[:MOVES_SHOWN])
    types = LIST_SEPARATOR.join(entry.type.name for entry in record.types)

    return PokemonSummary(
        title=f"{display_name(record.name)} (#{record.id})",
        name=record.name,
        sprite_url=record.sprites.front_default,
        types=types,
        height=format_measure(record.height),
        weight=format_measure(record.weight),
        base_experience="N/A" if record.base_experience is None else str(record.base_experience),
        abilities=abilities,
        stats=stats,
        moves=moves,
    )


def render_detail(summary: PokemonSummary) -> str:
    return templates.get_template("detail.html").render(pokemon=summary)


def render_error(message: str) -> str:
    return templates.get_template("error.html").render(message=message)


def render_raw(payload) -> str:
    """Pretty-prints the complete payload with two-space indentation."""
    return json.dumps(payload, indent=2, ensure_ascii=False)
