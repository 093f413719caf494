"""Static correction dictionary: canonical term -> known misspellings.

Norwegian and English real-estate vocabulary. Declaration order matters:
the exact-typo lookup returns the first canonical term listing the typo
("kontrakt" is both a canonical term and a listed typo of "contract").
"""

from collections.abc import Mapping
from types import MappingProxyType

COMMON_WORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    # Norwegian
    "bolig": ("bolih", "bolg", "boliig", "bolik", "bollig"),
    "eiendom": ("eiendomm", "eindom", "eeindom", "eiemdom"),
    "kontrakt": ("kontract", "kontakt", "kontraktt", "contrakt"),
    "leie": ("leei", "lie", "leeie", "liee"),
    "utleie": ("utlie", "utleei", "utlei", "uutleie"),
    "leilighet": ("leiligheet", "leilghet", "leilighe", "leilihet"),
    "hus": ("huus", "huss", "jus"),
    # English
    "apartment": ("apartmen", "appartment", "aparment", "appartement"),
    "house": ("hous", "housse", "hoose", "huose", "hause"),
    "rental": ("renta", "rentall", "rentel", "rentle", "rentl"),
    "property": ("propety", "proprety", "properti", "propertty", "propporty"),
    "contract": ("contrct", "contrat", "contrac", "kontrakt"),
    "agreement": ("agreemen", "aggreement", "agrement", "agreemnt"),
    "lease": ("leas", "leese", "leeese", "lese", "leasse"),
    "tenant": ("tenent", "tenaant", "tennat", "tennant"),
    "landlord": ("landord", "landlordd", "landlod", "lanldord"),
})
