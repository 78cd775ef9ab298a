"""Options controlling a single file conversion."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessSettings:
    show_diagnostics: bool = False
    include_outer_text: bool = False
    produce_markdown: bool = False
