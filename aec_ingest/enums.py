"""
Closed enumerations decoded from AEC result files.

Both enums are ``str`` enums whose values are the canonical spellings,
so they serialize to JSON as plain strings and validate back by value.

The two decoders are deliberately asymmetric:

- ``Division.decode()`` strips every non-alphabetic character and then
  requires an exact match.  No match raises ``DivisionDecodeError`` and
  the owning row group is dropped.
- ``PartyAffiliation.decode()`` never fails.  An unknown code yields
  ``PartyAffiliation.fallback()`` (``NAFD``) and is logged at TRACE level
  so new parties can be reviewed later.
"""

from __future__ import annotations

import logging
from enum import Enum

from aec_ingest.exceptions import DivisionDecodeError

logger = logging.getLogger(__name__)

# Finer than DEBUG; used for party fallbacks, which are frequent in
# older elections and only interesting when curating the party list.
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class PartyAffiliation(str, Enum):
    """Party codes as they appear in the ``PartyAb`` column."""

    LP = "LP"  # Liberal
    LNP = "LNP"  # Liberal National Party of Queensland
    NP = "NP"  # The Nationals
    CLP = "CLP"  # Country Liberal Party (NT)
    ALP = "ALP"  # Australian Labor Party
    XEN = "XEN"  # Centre Alliance
    KAP = "KAP"  # Katter's Australian Party
    GRN = "GRN"  # The Greens
    UAPP = "UAPP"  # United Australia Party
    IND = "IND"  # Independent
    ON = "ON"  # Pauline Hanson's One Nation
    LDP = "LDP"  # Liberal Democratic Party
    CYA = "CYA"  # Australian Federation Party
    AJP = "AJP"  # Animal Justice Party
    IMO = "IMO"  # Informed Medical Options Party
    GAP = "GAP"  # The Great Australian Party
    WAP = "WAP"  # Western Australia Party
    VNS = "VNS"  # Victorian Socialists
    AUC = "AUC"  # Australian Christians
    SOPA = "SOPA"  # FUSION: Science, Pirate, Secular, Climate Emergency
    CEC = "CEC"  # Australian Citizens Party
    TNL = "TNL"
    DHJP = "DHJP"  # Derryn Hinch's Justice Party
    SAL = "SAL"  # Socialist Alliance
    AUVA = "AUVA"  # Australian Values Party
    JLN = "JLN"  # Jacqui Lambie Network
    ASP = "ASP"  # Shooters, Fishers and Farmers Party
    IAP = "IAP"  # Indigenous - Aboriginal Party of Australia
    SPP = "SPP"  # Sustainable Australia Party
    AUP = "AUP"  # Australian Progressives
    DPDA = "DPDA"  # Drew Pavlou Democratic Alliance
    TLOC = "TLOC"  # The Local Party of Australia
    AUD = "AUD"  # Australian Democrats
    HMP = "HMP"  # Legalise Cannabis Australia
    REAS = "REAS"  # Reason Australia
    NAFD = "NAFD"  # Non Affiliated; also the decode fallback

    @classmethod
    def fallback(cls) -> PartyAffiliation:
        """The member returned for codes that match nothing."""
        return cls.NAFD

    @classmethod
    def decode(cls, raw: str) -> PartyAffiliation:
        """Exact-match *raw* against the known codes.

        Never raises: unknown codes (including the empty string) map to
        ``fallback()`` and the raw value is logged at TRACE level.
        """
        try:
            return cls(raw)
        except ValueError:
            logger.log(
                TRACE,
                "Party %r not identified, maybe it needs custom flow logic?",
                raw,
            )
            return cls.fallback()


class Division(str, Enum):
    """Federal electoral divisions, spelled with letters only.

    Source names such as ``Eden-Monaro``, ``Kingsford Smith`` or
    ``O'Connor`` decode to ``EdenMonaro``, ``KingsfordSmith`` and
    ``OConnor``.
    """

    # ACT
    Bean = "Bean"
    Canberra = "Canberra"
    Fenner = "Fenner"
    # NSW
    Banks = "Banks"
    Barton = "Barton"
    Bennelong = "Bennelong"
    Berowra = "Berowra"
    Blaxland = "Blaxland"
    Bradfield = "Bradfield"
    Calare = "Calare"
    Chifley = "Chifley"
    Cook = "Cook"
    Cowper = "Cowper"
    Cunningham = "Cunningham"
    Dobell = "Dobell"
    EdenMonaro = "EdenMonaro"
    Farrer = "Farrer"
    Fowler = "Fowler"
    Gilmore = "Gilmore"
    Grayndler = "Grayndler"
    Greenway = "Greenway"
    Hughes = "Hughes"
    Hume = "Hume"
    Hunter = "Hunter"
    KingsfordSmith = "KingsfordSmith"
    Lindsay = "Lindsay"
    Lyne = "Lyne"
    Macarthur = "Macarthur"
    Mackellar = "Mackellar"
    Macquarie = "Macquarie"
    McMahon = "McMahon"
    Mitchell = "Mitchell"
    NewEngland = "NewEngland"
    Newcastle = "Newcastle"
    NorthSydney = "NorthSydney"
    Page = "Page"
    Parkes = "Parkes"
    Parramatta = "Parramatta"
    Paterson = "Paterson"
    Reid = "Reid"
    Richmond = "Richmond"
    Riverina = "Riverina"
    Robertson = "Robertson"
    Shortland = "Shortland"
    Sydney = "Sydney"
    Warringah = "Warringah"
    Watson = "Watson"
    Wentworth = "Wentworth"
    Werriwa = "Werriwa"
    Whitlam = "Whitlam"
    # NT
    Lingiari = "Lingiari"
    Solomon = "Solomon"
    # QLD
    Blair = "Blair"
    Bonner = "Bonner"
    Bowman = "Bowman"
    Brisbane = "Brisbane"
    Capricornia = "Capricornia"
    Dawson = "Dawson"
    Dickson = "Dickson"
    Fadden = "Fadden"
    Fairfax = "Fairfax"
    Fisher = "Fisher"
    Flynn = "Flynn"
    Forde = "Forde"
    Griffith = "Griffith"
    Groom = "Groom"
    Herbert = "Herbert"
    Hinkler = "Hinkler"
    Kennedy = "Kennedy"
    Leichhardt = "Leichhardt"
    Lilley = "Lilley"
    Longman = "Longman"
    Maranoa = "Maranoa"
    McPherson = "McPherson"
    Moncrieff = "Moncrieff"
    Moreton = "Moreton"
    Oxley = "Oxley"
    Petrie = "Petrie"
    Rankin = "Rankin"
    Ryan = "Ryan"
    WideBay = "WideBay"
    Wright = "Wright"
    # SA
    Adelaide = "Adelaide"
    Barker = "Barker"
    Boothby = "Boothby"
    Grey = "Grey"
    Hindmarsh = "Hindmarsh"
    Kingston = "Kingston"
    Makin = "Makin"
    Mayo = "Mayo"
    Spence = "Spence"
    Sturt = "Sturt"
    # TAS
    Bass = "Bass"
    Braddon = "Braddon"
    Clark = "Clark"
    Franklin = "Franklin"
    Lyons = "Lyons"
    # VIC
    Aston = "Aston"
    Ballarat = "Ballarat"
    Bendigo = "Bendigo"
    Bruce = "Bruce"
    Calwell = "Calwell"
    Casey = "Casey"
    Chisholm = "Chisholm"
    Cooper = "Cooper"
    Corangamite = "Corangamite"
    Corio = "Corio"
    Deakin = "Deakin"
    Dunkley = "Dunkley"
    Flinders = "Flinders"
    Fraser = "Fraser"
    Gellibrand = "Gellibrand"
    Gippsland = "Gippsland"
    Goldstein = "Goldstein"
    Gorton = "Gorton"
    Hawke = "Hawke"
    Higgins = "Higgins"
    Holt = "Holt"
    Hotham = "Hotham"
    Indi = "Indi"
    Isaacs = "Isaacs"
    Jagajaga = "Jagajaga"
    Kooyong = "Kooyong"
    LaTrobe = "LaTrobe"
    Lalor = "Lalor"
    Macnamara = "Macnamara"
    Mallee = "Mallee"
    Maribyrnong = "Maribyrnong"
    McEwen = "McEwen"
    Melbourne = "Melbourne"
    Menzies = "Menzies"
    Monash = "Monash"
    Nicholls = "Nicholls"
    Scullin = "Scullin"
    Wannon = "Wannon"
    Wills = "Wills"
    # WA
    Brand = "Brand"
    Burt = "Burt"
    Canning = "Canning"
    Cowan = "Cowan"
    Curtin = "Curtin"
    Durack = "Durack"
    Forrest = "Forrest"
    Fremantle = "Fremantle"
    Hasluck = "Hasluck"
    Moore = "Moore"
    OConnor = "OConnor"
    Pearce = "Pearce"
    Perth = "Perth"
    Swan = "Swan"
    Tangney = "Tangney"

    @classmethod
    def decode(cls, raw: str, field: str | None = None) -> Division:
        """Strip non-alphabetic characters from *raw* and match exactly.

        Raises:
            DivisionDecodeError: If the stripped name is not a division.
        """
        letters = "".join(c for c in raw if c.isalpha())
        try:
            return cls(letters)
        except ValueError:
            raise DivisionDecodeError(raw, field=field) from None
