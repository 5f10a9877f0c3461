#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Adress-Domain-Modelle

Fachliche Klasse für einen Adress-Datensatz:
- AddressRecord: eine Eingabezeile mit sechs Feldern

Ein AddressRecord wird pro Eingabezeile neu erzeugt und ist unveränderlich.
Die Feldreihenfolge entspricht dem Adress-Layout (layouts.address_layout).
"""

from dataclasses import dataclass, fields
from typing import List, Sequence


@dataclass(frozen=True)
class AddressRecord:
    """Ein Adress-Datensatz (Nachname, Vorname, Straße, Ort, Bundesstaat, PLZ)."""
    last_name: str
    first_name: str
    street: str
    city: str
    state: str
    zip: str

    @classmethod
    def field_names(cls) -> List[str]:
        """Gibt die Feldnamen in Satzreihenfolge zurück."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_values(cls, values: Sequence[str]) -> "AddressRecord":
        """
        Erstellt einen Datensatz aus genau sechs Werten (positionsgenau).

        Raises:
            ValueError: wenn nicht genau sechs Werte übergeben werden
        """
        expected = len(fields(cls))
        if len(values) != expected:
            raise ValueError(
                f"Expected {expected} values, got {len(values)}"
            )
        return cls(*values)

    def values(self) -> List[str]:
        """Gibt die Feldwerte in Satzreihenfolge zurück."""
        return [getattr(self, name) for name in self.field_names()]
