"""Day and year cycles of the Javanese calendar (Sultan Agung era).

Covers the 5-day Pasaran, the 7-day Saptawara, the 35-day Wetonan, the
210-day Pawukon with its 30 wuku, the 8-year Windu, the 120-year Kurup,
the 12 solar Pranata Masa seasons and the Dina Mulya noble days.
"""

from __future__ import annotations

import bisect
import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import stub

__all__ = [
    "SULTAN_AGUNG_EPOCH_JDN",
    "JDN_MIN",
    "JDN_MAX",
    "AJ_MIN",
    "AJ_MAX",
    "KURUP_ASAPON_START_JDN",
    "KURUP_ASAPON_END_JDN",
    "PASARAN_NAMES_NGOKO",
    "PASARAN_NAMES_KRAMA",
    "PASARAN_NEPTU",
    "SAPTAWARA_NAMES",
    "SAPTAWARA_NEPTU",
    "SAPTAWARA_INDONESIAN",
    "Wetonan",
    "wetonan_neptu",
    "WUKU_NAMES",
    "PAWUKON_LENGTH",
    "WukuPos",
    "WinduYear",
    "WINDU_LENGTH_YEARS",
    "WINDU_LENGTH_DAYS",
    "SupraWinduGroup",
    "supra_windu_from_aj",
    "KurupRecord",
    "KURUP_ASAPON",
    "KURUP_LENGTH_YEARS",
    "KURUP_LENGTH_WINDU",
    "KURUP_LENGTH_DAYS",
    "PRANATA_MASA_NAMES",
    "PRANATA_MASA_SOLAR_OFFSETS",
    "PRANATA_MASA_SOLAR_YEAR_DAYS",
    "PRANATA_MASA_KASA_REFERENCE_JDN",
    "pranata_masa_from_jdn",
    "pranata_masa_name",
    "DinaMulyaEntry",
    "DINA_MULYA",
    "pasaran_from_jdn",
    "saptawara_from_jdn",
    "wetonan_from_jdn",
    "wuku_from_jdn",
    "wuku_pos_from_jdn",
    "pawukon_day_from_jdn",
]

# Epoch and supported range ---------------------------------------------------

#: Gregorian 1633-07-08 = 1 Sura 1555 AJ = 1 Muharram 1043 AH.
SULTAN_AGUNG_EPOCH_JDN = 2_317_690

#: Last day of AJ 2474 (about 2169 CE).
JDN_MAX = 2_643_714

#: First day of the current Kurup Asapon (Gregorian 1936-03-24).
KURUP_ASAPON_START_JDN = 2_428_252

#: Last day of the current Kurup Asapon.
KURUP_ASAPON_END_JDN = 2_470_776

AJ_MIN = 1555
AJ_MAX = 2474
JDN_MIN = SULTAN_AGUNG_EPOCH_JDN

# Pasaran (5-day market cycle) ------------------------------------------------

PASARAN_NAMES_NGOKO = ("Legi", "Pahing", "Pon", "Wage", "Kliwon")
PASARAN_NAMES_KRAMA = ("Manis", "Pahing", "Pon", "Cemeng", "Asih")
PASARAN_NEPTU = (5, 9, 7, 4, 8)

# Saptawara (7-day week, starting with Soma/Monday) ---------------------------

SAPTAWARA_NAMES = ("Soma", "Selasa", "Rebo", "Kemis", "Jemuwah", "Setu", "Ahad")
SAPTAWARA_NEPTU = (4, 3, 7, 8, 6, 9, 5)
SAPTAWARA_INDONESIAN = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")

#: A Wetonan day: ``(saptawara, pasaran)``.
Wetonan = Tuple[int, int]


def _lookup(table: tuple, index: int, what: str):
    if not 0 <= index < len(table):
        raise IndexError(f"{what} position {index} out of range 0-{len(table) - 1}")
    return table[index]


def wetonan_neptu(sapta: int, pasaran: int) -> int:
    """Return the combined neptu of a Saptawara and Pasaran position."""
    return _lookup(SAPTAWARA_NEPTU, sapta, "Saptawara") + _lookup(
        PASARAN_NEPTU, pasaran, "Pasaran"
    )


# Wuku and Pawukon ------------------------------------------------------------

WUKU_NAMES = (
    "Sinta",
    "Landep",
    "Ukir",
    "Kulantir",
    "Tolu",
    "Gumbreg",
    "Warigalit",
    "Warigagung",
    "Julungwangi",
    "Sungsang",
    "Galungan",
    "Kuningan",
    "Langkir",
    "Mandasiya",
    "Julungpujut",
    "Pahang",
    "Kuruwelut",
    "Marakeh",
    "Tambir",
    "Medangkungan",
    "Maktal",
    "Wuye",
    "Manahil",
    "Prangbakat",
    "Bala",
    "Wugu",
    "Wayang",
    "Kelawu",
    "Dukut",
    "Watugunung",
)

PAWUKON_LENGTH = 210


@dataclass(frozen=True)
class WukuPos:
    """A position in the 210-day Pawukon cycle: a wuku and a day within it."""

    wuku: int
    day_in_wuku: int

    def pawukon_day(self) -> int:
        """Return the absolute day in the Pawukon cycle (0-209)."""
        return self.wuku * 7 + self.day_in_wuku

    @classmethod
    def from_pawukon_day(cls, day: int) -> Optional["WukuPos"]:
        """Build from an absolute Pawukon day, or return ``None`` if out of range."""
        if not 0 <= day < PAWUKON_LENGTH:
            return None
        wuku, day_in_wuku = divmod(day, 7)
        return cls(wuku=wuku, day_in_wuku=day_in_wuku)


# Windu (8-year cycle) --------------------------------------------------------


class WinduYear(enum.Enum):
    """Year names of the 8-year Windu; Jimawal, Dal and Jimakir are leap years."""

    ALIP = 1
    EHE = 2
    JIMAWAL = 3
    JE = 4
    DAL = 5
    BE = 6
    WAWU = 7
    JIMAKIR = 8

    def is_leap(self) -> bool:
        """True for the 355-day years."""
        return self in (WinduYear.JIMAWAL, WinduYear.DAL, WinduYear.JIMAKIR)

    def days_in_year(self) -> int:
        """Return 355 for leap years and 354 otherwise."""
        return 355 if self.is_leap() else 354

    @classmethod
    def from_aj(cls, aj: int) -> "WinduYear":
        """Return the Windu year of an Anno Javanico year."""
        return cls((aj - 1) % 8 + 1)


WINDU_LENGTH_YEARS = 8
WINDU_LENGTH_DAYS = 2835


class SupraWinduGroup(enum.Enum):
    """Groups of windus within a Kurup."""

    ADI = "Adi"
    KUNTARA = "Kuntara"
    SENGARA = "Sengara"
    SANCAYA = "Sancaya"


def supra_windu_from_aj(aj: int) -> SupraWinduGroup:
    """Return the supra-windu group of an AJ year.

    Always raises :class:`~nusantara.errors.NotImplementedCalendarError`:
    the full Kurup table the computation needs is not available.
    """
    stub("Supra-windu group: requires Danudji (2006) Kurup table. Not yet implemented.")


# Kurup (120-year cycle) ------------------------------------------------------


@dataclass(frozen=True)
class KurupRecord:
    """A complete 120-year Kurup with its Wetonan anchor and bounds."""

    name: str
    start_weton: Wetonan
    start_jdn: int
    end_jdn: int
    start_aj: int
    end_aj: int


KURUP_ASAPON = KurupRecord(
    name="Asapon",
    start_weton=(1, 2),
    start_jdn=KURUP_ASAPON_START_JDN,
    end_jdn=KURUP_ASAPON_END_JDN,
    start_aj=1868,
    end_aj=1987,
)

KURUP_LENGTH_YEARS = 120
KURUP_LENGTH_WINDU = 15
KURUP_LENGTH_DAYS = 42_525

# Pranata Masa (12 solar seasons) ---------------------------------------------

PRANATA_MASA_NAMES = (
    "Kasa",
    "Karo",
    "Katelu",
    "Kapat",
    "Kalima",
    "Kanem",
    "Kapitu",
    "Kawolu",
    "Kasongo",
    "Kasepuluh",
    "Desta",
    "Sada",
)

PRANATA_MASA_SOLAR_OFFSETS = (0, 30, 61, 91, 122, 153, 183, 214, 245, 275, 306, 336)
PRANATA_MASA_SOLAR_YEAR_DAYS = 365

#: 1633-06-21, about the first Kasa before the epoch.
PRANATA_MASA_KASA_REFERENCE_JDN = 2_317_672


def pranata_masa_from_jdn(jdn: int) -> int:
    """Return the Pranata Masa position (0 = Kasa ... 11 = Sada) of a JDN."""
    day_in_year = (jdn - PRANATA_MASA_KASA_REFERENCE_JDN) % PRANATA_MASA_SOLAR_YEAR_DAYS
    return bisect.bisect_right(PRANATA_MASA_SOLAR_OFFSETS, day_in_year) - 1


def pranata_masa_name(pos: int) -> str:
    """Return the name of a Pranata Masa position."""
    return _lookup(PRANATA_MASA_NAMES, pos, "Pranata Masa")


# Dina Mulya (noble days) -----------------------------------------------------


@dataclass(frozen=True)
class DinaMulyaEntry:
    """A noble day: a wuku combined with a Saptawara day."""

    wuku: int
    saptawara: int
    name: str


DINA_MULYA = (
    DinaMulyaEntry(0, 4, "Sinta Jemuwah"),
    DinaMulyaEntry(1, 5, "Landep Setu"),
    DinaMulyaEntry(2, 6, "Ukir Ahad"),
    DinaMulyaEntry(3, 0, "Kulantir Soma"),
    DinaMulyaEntry(4, 1, "Tolu Selasa"),
    DinaMulyaEntry(5, 2, "Gumbreg Rebo"),
    DinaMulyaEntry(6, 3, "Warigalit Kemis"),
    DinaMulyaEntry(7, 4, "Warigagung Jemuwah"),
    DinaMulyaEntry(8, 5, "Julungwangi Setu"),
    DinaMulyaEntry(9, 6, "Sungsang Ahad"),
    DinaMulyaEntry(10, 0, "Galungan Soma"),
    DinaMulyaEntry(11, 1, "Kuningan Selasa"),
)

# Cycle positions from a JDN --------------------------------------------------


def pasaran_from_jdn(jdn: int) -> int:
    """Return the Pasaran position (0 = Legi ... 4 = Kliwon) of a JDN."""
    return jdn % 5


def saptawara_from_jdn(jdn: int) -> int:
    """Return the Saptawara position (0 = Soma ... 6 = Ahad) of a JDN."""
    return jdn % 7


def wetonan_from_jdn(jdn: int) -> Wetonan:
    """Return the ``(saptawara, pasaran)`` Wetonan of a JDN."""
    return saptawara_from_jdn(jdn), pasaran_from_jdn(jdn)


def wuku_from_jdn(jdn: int) -> int:
    """Return the wuku index (0-29) of a JDN."""
    week = abs(jdn) // 7
    if jdn < 0:
        week = -week
    return (week + 12) % 30


def wuku_pos_from_jdn(jdn: int) -> WukuPos:
    """Return the full Pawukon position of a JDN."""
    return WukuPos(wuku=wuku_from_jdn(jdn), day_in_wuku=saptawara_from_jdn(jdn))


def pawukon_day_from_jdn(jdn: int) -> int:
    """Return the Pawukon day (0-209) of a JDN, counted from the epoch."""
    return (jdn - SULTAN_AGUNG_EPOCH_JDN) % PAWUKON_LENGTH