# file: src/dbnomics_bib/formatters.py
"""
Text serializers for citation records.

Both produce a ``misc`` entry with fields in ENTRY_FIELDS order; only the
layout differs. Values are LaTeX-escaped except for ``url``.
"""

from __future__ import annotations

from typing import Callable, Dict

from .models import CitationRecord

Formatter = Callable[[CitationRecord], str]

_LATEX_ESCAPES = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

# Fields written as-is
_VERBATIM_FIELDS = frozenset({"url"})


def escape_latex(value: str) -> str:
    return "".join(_LATEX_ESCAPES.get(ch, ch) for ch in value)


def _field_values(record: CitationRecord) -> Dict[str, str]:
    return {
        name: value if name in _VERBATIM_FIELDS else escape_latex(value)
        for name, value in record.fields().items()
    }


def to_bibtex(record: CitationRecord) -> str:
    """
    Render a BibTeX entry.

    Example:
        @Misc{MIR-2024-05-01,
          title = {Interest rates (M.EE.B.A2C.A.R.A.2250.EUR.N)},
          ...
          note = {Accessed 2024-05-01, series last updated 2024-04-30.}
        }
    """
    lines = [f"@Misc{{{record.key},"]
    body = [f"  {name} = {{{value}}}" for name, value in _field_values(record).items()]
    lines.append(",\n".join(body))
    lines.append("}")
    return "\n".join(lines)


def to_biblatex(record: CitationRecord) -> str:
    """Render a BibLaTeX entry with aligned field names."""
    values = _field_values(record)
    width = max(len(name) for name in values)
    lines = [f"@misc{{{record.key},"]
    lines.extend(f"  {name:<{width}} = {{{value}}}," for name, value in values.items())
    lines.append("}")
    return "\n".join(lines)


DEFAULT_FORMATTERS: Dict[str, Formatter] = {
    "bibtex": to_bibtex,
    "biblatex": to_biblatex,
}
