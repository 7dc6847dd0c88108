"""Parse synset and hypernym records from WordNet-style text files."""

from collections.abc import Iterable, Iterator


def _parse_id(text: str, line_number: int) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"line {line_number}: invalid synset id {text!r}") from None
    if value < 0:
        raise ValueError(f"line {line_number}: negative synset id {value}")
    return value


def parse_synset_line(line: str, line_number: int = 1) -> tuple[int, list[str], str]:
    """Split a synset record into its fields.

    The record format is ``id,noun1 noun2 ...,gloss``. The gloss is the rest
    of the line after the second comma and may itself contain commas.

    Args:
        line: One record, without the trailing newline.
        line_number: Position of the line in its file, for error messages.

    Returns:
        Tuple of (synset id, nouns, gloss).

    Raises:
        ValueError: If the line has fewer than three fields or a bad id.
    """
    fields = line.split(",", 2)
    if len(fields) < 3:
        raise ValueError(f"line {line_number}: expected 'id,nouns,gloss', got {line!r}")
    id_text, nouns_text, gloss = fields
    nouns = nouns_text.split()
    if not nouns:
        raise ValueError(f"line {line_number}: synset has no nouns")
    return _parse_id(id_text.strip(), line_number), nouns, gloss


def parse_hypernym_line(line: str, line_number: int = 1) -> tuple[int, list[int]]:
    """Split a hypernym record ``id,h1,h2,...`` into (id, hypernym ids).

    A record holding only an id has no hypernyms.
    """
    fields = line.split(",")
    synset_id = _parse_id(fields[0].strip(), line_number)
    hypernyms = [_parse_id(f.strip(), line_number) for f in fields[1:] if f.strip()]
    return synset_id, hypernyms


def read_synsets(lines: Iterable[str]) -> Iterator[tuple[int, list[str], str]]:
    """Yield parsed synset records, skipping blank lines."""
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        yield parse_synset_line(line, line_number)


def read_hypernyms(lines: Iterable[str]) -> Iterator[tuple[int, list[int]]]:
    """Yield parsed hypernym records, skipping blank lines."""
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        yield parse_hypernym_line(line, line_number)
