from pydantic import BaseModel

# Models for the raw Pokemon data fetched from PokeAPI (Internal Contract).
# Only the fields the page displays are declared; the rest of the payload is ignored here
# and kept as-is for the raw JSON view.
class NamedResource(BaseModel):
    name: str
    url: str | None = None

class PokemonType(BaseModel):
    slot: int | None = None
    type: NamedResource

class PokemonAbility(BaseModel):
    ability: NamedResource
    is_hidden: bool = False
    slot: int | None = None

class PokemonStat(BaseModel):
    base_stat: int
    effort: int | None = None
    stat: NamedResource

class PokemonMove(BaseModel):
    move: NamedResource

class PokemonSprites(BaseModel):
    # PokeAPI sends null for forms without artwork
    front_default: str | None = None

class PokemonRecord(BaseModel):
    id: int
    name: str
    sprites: PokemonSprites
    types: list[PokemonType]
    height: int
    weight: int
    base_experience: int | None = None
    abilities: list[PokemonAbility]
    stats: list[PokemonStat]
    moves: list[PokemonMove]

# Display strings derived from a record
class PokemonSummary(BaseModel):
    title: str
    name: str
    sprite_url: str | None
    types: str
    height: str
    weight: str
    base_experience: str
    abilities: str
    stats: str
    moves: str

# The three output regions of the lookup page, replaced as a whole on every update
class ViewState(BaseModel):
    detail: str = ""
    raw_json: str = ""
    request_url: str = ""
    loading: bool = False
    error: str | None = None

# Request bodies for the JSON API
class LookupRequest(BaseModel):
    query: str = ""

class KeyEvent(BaseModel):
    key: str
    query: str | None = None
