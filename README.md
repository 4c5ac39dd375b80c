# nusantara

Julian Day Number (JDN) conversions and the day and year cycles of the
Javanese calendar of the Sultan Agung era, for Python. No third-party
libraries are needed at runtime.

The package has three modules:

- `nusantara.gregorian`: proleptic Gregorian dates ⇄ JDN.
- `nusantara.jawa_cycles`: the Javanese cycles, computed from a JDN.
- `nusantara.errors`: the calendar exceptions.

## Installation

```
pip install .
```

## Gregorian dates and Julian Day Numbers

```python
from nusantara.gregorian import gregorian_to_jdn, jdn_to_gregorian

gregorian_to_jdn(1633, 7, 8)    # 2317690
jdn_to_gregorian(2317690)       # (1633, 7, 8)
gregorian_to_jdn(1582, 10, 15)  # 2299161
```

Years may be zero or negative for dates before the common era.
`jdn_to_gregorian` raises `OutOfRangeError` for a JDN outside the signed
32-bit range.

## Javanese cycles

`nusantara.jawa_cycles` works directly on a JDN. The epoch is
`SULTAN_AGUNG_EPOCH_JDN` (2317690, Gregorian 1633-07-08 = 1 Sura 1555 AJ);
the supported span is `JDN_MIN`–`JDN_MAX` and `AJ_MIN`–`AJ_MAX`
(AJ 1555–2474).

```python
from nusantara.jawa_cycles import (
    SULTAN_AGUNG_EPOCH_JDN,
    PASARAN_NAMES_NGOKO,
    SAPTAWARA_NAMES,
    WUKU_NAMES,
    pasaran_from_jdn,
    saptawara_from_jdn,
    wetonan_from_jdn,
    wetonan_neptu,
    wuku_from_jdn,
    wuku_pos_from_jdn,
    pawukon_day_from_jdn,
    pranata_masa_from_jdn,
    pranata_masa_name,
    WinduYear,
    WukuPos,
)

jdn = SULTAN_AGUNG_EPOCH_JDN
wetonan_from_jdn(jdn)                 # (4, 0): Jemuwah Legi
SAPTAWARA_NAMES[saptawara_from_jdn(jdn)]  # "Jemuwah"
PASARAN_NAMES_NGOKO[pasaran_from_jdn(jdn)]  # "Legi"
WUKU_NAMES[wuku_from_jdn(jdn)]        # "Sinta"
pawukon_day_from_jdn(jdn)             # 0
wetonan_neptu(1, 2)                   # Selasa Pon → 10
pranata_masa_name(pranata_masa_from_jdn(jdn))  # "Kasa"

WinduYear.from_aj(1959)               # WinduYear.WAWU
WinduYear.DAL.is_leap()               # True
WinduYear.ALIP.days_in_year()         # 354
WukuPos.from_pawukon_day(7)           # WukuPos(wuku=1, day_in_wuku=0)
WukuPos.from_pawukon_day(210)         # None
```

What the module provides:

- Pasaran (5 days): `PASARAN_NAMES_NGOKO`, `PASARAN_NAMES_KRAMA`,
  `PASARAN_NEPTU`, `pasaran_from_jdn`.
- Saptawara (7 days, starting with Soma/Monday): `SAPTAWARA_NAMES`,
  `SAPTAWARA_INDONESIAN`, `SAPTAWARA_NEPTU`, `saptawara_from_jdn`.
- Wetonan (35 days): `wetonan_from_jdn`, `wetonan_neptu`.
- Pawukon (210 days, 30 wuku): `WUKU_NAMES`, `PAWUKON_LENGTH`, `WukuPos`,
  `wuku_from_jdn`, `wuku_pos_from_jdn`, `pawukon_day_from_jdn`.
- Windu (8 years): `WinduYear`, `WINDU_LENGTH_YEARS`, `WINDU_LENGTH_DAYS`.
- Kurup (120 years): `KurupRecord`, `KURUP_ASAPON`, `KURUP_LENGTH_YEARS`,
  `KURUP_LENGTH_WINDU`, `KURUP_LENGTH_DAYS`.
- Pranata Masa (12 solar seasons, a fixed 365-day approximation):
  `PRANATA_MASA_NAMES`, `PRANATA_MASA_SOLAR_OFFSETS`,
  `pranata_masa_from_jdn`, `pranata_masa_name`.
- Dina Mulya (noble days): `DinaMulyaEntry`, `DINA_MULYA`.

`wetonan_neptu` and `pranata_masa_name` raise `IndexError` for a position
outside their tables. `supra_windu_from_aj` and the `SupraWinduGroup` enum
are defined, but the function always raises `NotImplementedCalendarError`
because its reference tables are not available.

## Errors

`nusantara.errors` defines `CalendarError` and its subclasses
`OutOfRangeError` and `InvalidParametersError` (both also `ValueError`),
`NotImplementedCalendarError` (also `NotImplementedError`) and
`CalendarArithmeticError` (also `ArithmeticError`). Each carries a
`message`; `str()` prefixes it, e.g.
`"Date out of supported range: ..."`. `stub(message)` raises
`NotImplementedCalendarError`.

## What the package does not do

- It does not convert a JDN into a full Javanese date: there is no
  function giving the AJ year, lunar month (Sura–Besar) and lunar day.
  Only the cyclic positions above are computed.
- It does not evaluate how auspicious a day is for an activity.
- It has no command-line interface.

## Running the tests

```
pip install .[test]
pytest
```