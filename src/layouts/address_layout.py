#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Adress-Layout (Fixed-Width-Satzbeschreibung)

Dieses Modul enthält die Metadaten für den Adress-Ausgabesatz.
Das Layout entspricht dem historischen COBOL-Ausgabesatz:

    OUT-LAST-NAME  PIC X(25)  + FILLER PIC X(5)
    OUT-FIRST-NAME PIC X(15)  + FILLER PIC X(5)
    OUT-STREET     PIC X(30)  + FILLER PIC X(5)
    OUT-CITY       PIC X(15)  + FILLER PIC X(5)
    OUT-STATE      PIC XXX    + FILLER PIC X(5)
    OUT-ZIP        PIC X(10)  + FILLER PIC X(38)

WICHTIG:
- Die Reihenfolge der Felder entspricht der Reihenfolge in AddressRecord!
- Alle Positionen in get_layout_info() sind 1-basiert (wie in der Satzbeschreibung)
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FieldDefinition:
    """Definition eines einzelnen Feldes inkl. nachfolgendem Filler."""
    name: str
    label: str
    width: int
    filler: int

    @property
    def total_width(self) -> int:
        """Feldbreite inkl. Filler."""
        return self.width + self.filler


LayoutDefinition = Tuple[FieldDefinition, ...]


# =============================================================================
# Adress-Ausgabesatz
# =============================================================================
ADDRESS_LAYOUT: LayoutDefinition = (
    FieldDefinition(name="last_name", label="Last Name", width=25, filler=5),
    FieldDefinition(name="first_name", label="First Name", width=15, filler=5),
    FieldDefinition(name="street", label="Street", width=30, filler=5),
    FieldDefinition(name="city", label="City", width=15, filler=5),
    FieldDefinition(name="state", label="State", width=3, filler=5),
    FieldDefinition(name="zip", label="Zip", width=10, filler=38),
)


def get_field_widths(layout: LayoutDefinition = ADDRESS_LAYOUT) -> Tuple[Tuple[int, int], ...]:
    """Gibt die (Feldbreite, Fillerbreite)-Paare in Satzreihenfolge zurück."""
    return tuple((field.width, field.filler) for field in layout)


def get_record_length(layout: LayoutDefinition = ADDRESS_LAYOUT) -> int:
    """Gibt die Satzlänge (ohne Zeilenende) eines Layouts zurück."""
    return sum(width + filler for width, filler in get_field_widths(layout))


RECORD_LENGTH: int = get_record_length()


def get_layout_info(layout: LayoutDefinition = ADDRESS_LAYOUT) -> str:
    """Gibt eine formatierte Beschreibung eines Layouts zurück."""
    lines = [
        f"Record length: {get_record_length(layout)} characters",
        f"Fields: {len(layout)}",
        "",
        "Field overview:",
        "-" * 80,
    ]

    start = 1
    for field in layout:
        lines.append(
            f"  {field.name:12} | Pos {start:3}-{start + field.width - 1:3} "
            f"| Width {field.width:3} | Filler {field.filler:3} | {field.label}"
        )
        start += field.total_width

    return "\n".join(lines)


# =============================================================================
# Test / Demo
# =============================================================================
if __name__ == "__main__":
    print("=" * 80)
    print("Address layout")
    print("=" * 80)
    print()
    print(get_layout_info())
