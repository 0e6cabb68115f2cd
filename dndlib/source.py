"""Publication sources: which book (and page) a resource comes from."""

from __future__ import annotations

from typing import Any, List, Optional

from .enums import StringEnum
from .errors import (
    strict_validate_optional_array_prop,
    strict_validate_optional_prop,
    strict_validate_required_prop,
)
from .model import Model
from .validator import (
    ValidationErrors,
    validate_array_of_objects,
    validate_boolean,
    validate_enum,
    validate_integer,
    validate_string,
)

__all__ = [
    "PublicationID",
    "PUBLICATION_TITLES",
    "get_publication_title",
    "AdditionalSource",
    "Source",
]


class PublicationID(StringEnum):
    HB = "HB"
    UA = "UA"
    PHB = "PHB"
    MM = "MM"
    DMG = "DMG"
    SCAG = "SCAG"
    AL = "AL"
    VGM = "VGM"
    XGE = "XGE"
    MTF = "MTF"
    GGR = "GGR"
    SAC = "SAC"
    AI = "AI"
    ERLW = "ERLW"
    RMR = "RMR"
    EGW = "EGW"
    MOT = "MOT"
    IDRotF = "IDRotF"
    TCE = "TCE"


PUBLICATION_TITLES = {
    PublicationID.HB: "Homebrew",
    PublicationID.UA: "Unearthed Arcana",
    PublicationID.PHB: "Player's Handbook",
    PublicationID.MM: "Monster Manual",
    PublicationID.DMG: "Dungeon Master's Guide",
    PublicationID.SCAG: "Sword Coast Adventurer's Guide",
    PublicationID.AL: "Adventurer's League",
    PublicationID.VGM: "Volo's Guide to Monsters",
    PublicationID.XGE: "Xanathar's Guide to Everything",
    PublicationID.MTF: "Mordenkainen's Tome of Foes",
    PublicationID.GGR: "Guildmaster's Guide to Ravnica",
    PublicationID.SAC: "Sage Advice Compendium",
    PublicationID.AI: "Acquisitions Incorporated",
    PublicationID.ERLW: "Eberron: Rising from the Last War",
    PublicationID.RMR: "Dungeons & Dragons vs. Rick and Morty: Basic Rules",
    PublicationID.EGW: "Explorer's Guide to Wildemount",
    PublicationID.MOT: "Mythic Odysseys of Theros",
    PublicationID.IDRotF: "Icewind Dale: Rime of the Frostmaiden",
    PublicationID.TCE: "Tasha's Cauldron of Everything",
}


def get_publication_title(publication_id: Any) -> str:
    """Full title for *publication_id*, or ``"Unknown"``."""
    if not PublicationID.has(publication_id):
        return "Unknown"
    return PUBLICATION_TITLES[PublicationID(str(publication_id))]


class AdditionalSource(Model):
    """A secondary printing of the same material."""

    TYPE_NAME = "Source::Additional"
    FIELDS = {
        "publicationID": "publication_id",
        "title": "title",
        "page": "page",
        "isUA": "is_ua",
        "isSRD": "is_srd",
    }

    def __init__(
        self,
        publication_id: Any = PublicationID.HB,
        title: str = "Unknown Source",
        page: Optional[int] = None,
        is_ua: bool = False,
        is_srd: bool = False,
    ):
        self.publication_id = publication_id
        self.title = title
        self.page = page
        self.is_ua = is_ua
        self.is_srd = is_srd

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        name = cls.type_name()
        strict_validate_required_prop(props, name, "publicationID", "string")
        strict_validate_required_prop(props, name, "title", "string")
        strict_validate_optional_prop(props, name, "page", "number")
        strict_validate_optional_prop(props, name, "isUA", "boolean")
        strict_validate_optional_prop(props, name, "isSRD", "boolean")

    def validate(self) -> ValidationErrors:
        name = self.type_name()
        errs: ValidationErrors = []
        validate_enum(errs, name, "publicationID", self.publication_id, PublicationID)
        validate_string(errs, name, "title", self.title)
        validate_integer(errs, name, "page", self.page, {"positive": True}, True)
        validate_boolean(errs, name, "isUA", self.is_ua, True)
        validate_boolean(errs, name, "isSRD", self.is_srd, True)
        return errs


class Source(AdditionalSource):
    """Primary publication of a resource, with optional further printings."""

    TYPE_NAME = "Source"
    FIELDS = {**AdditionalSource.FIELDS, "additional": "additional"}
    NESTED = {"additional": [AdditionalSource]}

    def __init__(self, *args: Any, additional: Optional[List[AdditionalSource]] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.additional: List[AdditionalSource] = list(additional or [])

    @classmethod
    def strict_validate_props(cls, props: Any) -> None:
        super().strict_validate_props(props)
        strict_validate_optional_array_prop(props, "Source", "additional", AdditionalSource.strict_validate_props)

    @property
    def publication_title(self) -> str:
        return get_publication_title(self.publication_id)

    def validate(self) -> ValidationErrors:
        errs = super().validate()
        validate_array_of_objects(errs, "Source", "additional", self.additional, AdditionalSource.validate_value, True)
        return errs
