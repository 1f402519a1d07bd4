"""Media models decoded from TMDB responses."""

from typing import ClassVar, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictInt,
    StrictStr,
    ValidationError,
)

from apitest.models.ordering import SeasonSet, season_compare, season_equals

ModelT = TypeVar("ModelT", bound=BaseModel)


class DeserializationError(ValueError):
    """A response body did not match the expected schema."""

    def __init__(self, message: str, original_exception: Exception = None):
        super().__init__(message)
        self.original_exception = original_exception
        self.locations: List[str] = []
        if isinstance(original_exception, ValidationError):
            self.locations = _error_locations(original_exception)


def _error_locations(exc: ValidationError) -> List[str]:
    locations = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
    # JSON syntax errors carry an empty location
    return [loc for loc in locations if loc]


def renamed_fields(field_map: Dict[str, str]) -> ConfigDict:
    """Build a model config from an external -> internal field name table.

    Fields missing from the table keep their own name on the wire. Internal
    names are accepted when constructing records directly; :func:`decode`
    only accepts the external names.
    """
    aliases = {internal: external for external, internal in field_map.items()}
    return ConfigDict(
        frozen=True,
        extra="ignore",
        validate_by_alias=True,
        validate_by_name=True,
        alias_generator=lambda name: aliases.get(name, name),
    )


class Season(BaseModel):
    """A season of a TV show, identified by its season number."""

    FIELD_MAP: ClassVar[Dict[str, str]] = {
        "season_number": "id",
        "episode_count": "episode_count",
    }
    model_config = renamed_fields(FIELD_MAP)

    id: StrictInt
    episode_count: StrictInt

    def equals(self, other: "Season") -> bool:
        return season_equals(self, other)

    def compare(self, other: "Season") -> int:
        return season_compare(self, other)


class Show(BaseModel):
    """A TV show with its seasons in descending order."""

    FIELD_MAP: ClassVar[Dict[str, str]] = {"original_name": "name"}
    model_config = renamed_fields(FIELD_MAP)

    name: StrictStr
    seasons: SeasonSet


class CastMember(BaseModel):
    """A credited person playing a character (main cast or guest star)."""

    FIELD_MAP: ClassVar[Dict[str, str]] = {
        "name": "real_name",
        "character": "cast_name",
    }
    model_config = renamed_fields(FIELD_MAP)

    id: StrictInt
    real_name: StrictStr
    cast_name: StrictStr


class CrewMember(BaseModel):
    """A credited crew member. Crew entries carry a job instead of a character."""

    FIELD_MAP: ClassVar[Dict[str, str]] = {"name": "real_name"}
    model_config = renamed_fields(FIELD_MAP)

    id: StrictInt
    real_name: StrictStr
    job: StrictStr
    department: StrictStr


class Episode(BaseModel):
    """Credits of a single episode."""

    FIELD_MAP: ClassVar[Dict[str, str]] = {"guest_stars": "guest_stars"}
    model_config = renamed_fields(FIELD_MAP)

    cast: Tuple[CastMember, ...]
    crew: Tuple[CrewMember, ...]
    guest_stars: Tuple[CastMember, ...]

    def find_cast(self, real_name: str, cast_name: str) -> Optional[CastMember]:
        return _find_member(self.cast, real_name, cast_name)

    def find_guest(self, real_name: str, cast_name: str) -> Optional[CastMember]:
        return _find_member(self.guest_stars, real_name, cast_name)


def _find_member(
    members: Tuple[CastMember, ...], real_name: str, cast_name: str
) -> Optional[CastMember]:
    for member in members:
        if member.real_name == real_name and member.cast_name == cast_name:
            return member
    return None


def decode(model: Type[ModelT], text: str | bytes) -> ModelT:
    """Decode a raw JSON body into ``model``.

    Raises:
        DeserializationError: on malformed JSON, missing fields or wrong types.
    """
    try:
        # by_name=False keeps e.g. a season's own "id" from standing in for season_number
        return model.model_validate_json(text, by_alias=True, by_name=False)
    except ValidationError as exc:
        message = f"Failed to decode {model.__name__}: {exc.error_count()} error(s)"
        locations = _error_locations(exc)
        if locations:
            message = f"{message} at {', '.join(locations)}"
        raise DeserializationError(message, exc) from exc


def decode_show(text: str | bytes) -> Show:
    return decode(Show, text)


def decode_episode(text: str | bytes) -> Episode:
    return decode(Episode, text)
