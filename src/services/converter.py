"""
Konvertierung CSV -> Fixed-Width.

Liest die Eingabedatei zeilenweise, parst jede Zeile in einen AddressRecord
und schreibt pro gueltigem Datensatz eine Fixed-Width-Zeile in die Ausgabedatei.

Fehlerklassen:
- Zeile mit falscher Feldanzahl: Warnung, Zeile wird uebersprungen
- I/O-Fehler (Oeffnen, Lesen, Schreiben): ConversionError, Abbruch
"""

import logging
from dataclasses import dataclass, field
from typing import IO, Iterator, List, Optional, Tuple

from config.settings import INPUT_ENCODING, OUTPUT_ENCODING
from parser.csv_line_parser import parse_line
from parser.fixed_width import format_record

logger = logging.getLogger(__name__)

REASON_FIELD_COUNT = "unexpected number of fields"

STAGE_OPEN_INPUT = "open_input"
STAGE_OPEN_OUTPUT = "open_output"
STAGE_READ = "read"
STAGE_WRITE = "write"

_STAGE_DESCRIPTIONS = {
    STAGE_OPEN_INPUT: "failed to open input file",
    STAGE_OPEN_OUTPUT: "failed to create output file",
    STAGE_READ: "error reading input file",
    STAGE_WRITE: "error writing output file",
}


class ConversionError(Exception):
    """Wird bei einem I/O-Fehler ausgeloest, der die Konvertierung abbricht."""
    def __init__(
        self,
        stage: str,
        path: str,
        cause: Exception,
        line_number: Optional[int] = None
    ):
        self.stage = stage
        self.path = path
        self.cause = cause
        self.line_number = line_number

        message = f"{_STAGE_DESCRIPTIONS.get(stage, stage)} '{path}'"
        if line_number is not None:
            message += f" at line {line_number}"
        super().__init__(f"{message}: {cause}")


@dataclass
class ConversionResult:
    """Ergebnis eines erfolgreichen Konvertierungslaufs."""
    input_path: str
    output_path: str
    record_count: int = 0
    skipped_lines: List[int] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_lines)


def _read_lines(input_file: IO[bytes], path: str) -> Iterator[Tuple[int, str]]:
    """Liefert (Zeilennummer, Zeile) mit 1-basierter Zeilennummer.

    Zeilen werden nur an "\\n" getrennt; ein einzelnes "\\r" bleibt Teil der
    Zeile. Jede Zeile wird fuer sich dekodiert, damit ein Dekodierfehler
    der richtigen Zeile zugeordnet wird.
    """
    lines = iter(input_file)
    line_number = 0
    while True:
        try:
            raw_bytes = next(lines)
        except StopIteration:
            return
        except OSError as e:
            raise ConversionError(STAGE_READ, path, e, line_number + 1) from e
        line_number += 1
        try:
            raw_line = raw_bytes.decode(INPUT_ENCODING)
        except UnicodeDecodeError as e:
            raise ConversionError(STAGE_READ, path, e, line_number) from e
        yield line_number, raw_line


def _convert_lines(
    input_file: IO[bytes],
    output_file: IO[str],
    result: ConversionResult
) -> None:
    for line_number, raw_line in _read_lines(input_file, result.input_path):
        # Leere Zeilen ohne Warnung ueberspringen
        if not raw_line.strip():
            continue

        record = parse_line(raw_line.rstrip("\r\n"))
        if record is None:
            logger.warning(f"Line {line_number} has {REASON_FIELD_COUNT}, skipping")
            result.skipped_lines.append(line_number)
            continue

        try:
            output_file.write(format_record(record) + "\n")
        except OSError as e:
            raise ConversionError(STAGE_WRITE, result.output_path, e, line_number) from e

        result.record_count += 1


def convert(input_path: str, output_path: str) -> ConversionResult:
    """
    Konvertiert eine Adress-CSV-Datei in eine Fixed-Width-Datei.

    Die Ausgabedatei wird angelegt bzw. geleert. Sie wird auf jedem
    Ausgangspfad geschlossen, auch wenn ein Fehler auftritt.

    Args:
        input_path: Pfad zur CSV-Eingabedatei
        output_path: Pfad zur Fixed-Width-Ausgabedatei

    Returns:
        ConversionResult mit Anzahl geschriebener und uebersprungener Datensaetze

    Raises:
        ConversionError: bei jedem Fehler beim Oeffnen, Lesen oder Schreiben
    """
    result = ConversionResult(input_path=input_path, output_path=output_path)

    try:
        input_file = open(input_path, "rb")
    except OSError as e:
        raise ConversionError(STAGE_OPEN_INPUT, input_path, e) from e

    with input_file:
        try:
            output_file = open(output_path, "w", encoding=OUTPUT_ENCODING, newline="\n")
        except OSError as e:
            raise ConversionError(STAGE_OPEN_OUTPUT, output_path, e) from e

        # close() schreibt den Puffer; Fehler dabei sind Schreibfehler
        try:
            with output_file:
                _convert_lines(input_file, output_file, result)
        except OSError as e:
            raise ConversionError(STAGE_WRITE, output_path, e) from e

    logger.info(f"Successfully processed {result.record_count} records")
    return result
