"""Jinja2 rendering of the prompts sent to providers."""

from pathlib import Path
from typing import List, Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from doc2code.languages import display_name

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


class PromptRenderer:
    """Renders system, user, chunk-framing and combination prompts."""

    def __init__(self, templates_dir: Optional[Union[str, Path]] = None):
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )

    def _render(self, name: str, **context) -> str:
        return self._env.get_template(name).render(**context).strip()

    def system_prompt(self, language: str) -> str:
        return self._render("system.txt.jinja2", language=display_name(language))

    def user_prompt(self, documentation: str, language: str) -> str:
        return self._render(
            "user.txt.jinja2", documentation=documentation, language=display_name(language)
        )

    def initial_chunk_prompt(self, chunk: str, total: int) -> str:
        return self._render("chunk_initial.txt.jinja2", chunk=chunk, total=total)

    def followup_chunk_prompt(self, chunk: str, index: int, total: int) -> str:
        """Framing for chunk ``index`` (1-based, >= 2) of ``total``."""
        return self._render("chunk_followup.txt.jinja2", chunk=chunk, index=index, total=total)

    def combine_prompt(self, parts: List[str], language: str) -> str:
        return self._render("combine.txt.jinja2", parts=parts, language=display_name(language))


default_renderer = PromptRenderer()
