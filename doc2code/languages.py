"""Target languages offered for SDK generation.

Any non-empty language name is accepted by the generator; this catalogue only
drives display names and the file extension used for downloads.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class TargetLanguage:
    id: str
    name: str
    extension: str


SUPPORTED_LANGUAGES: List[TargetLanguage] = [
    TargetLanguage("javascript", "JavaScript", "js"),
    TargetLanguage("typescript", "TypeScript", "ts"),
    TargetLanguage("python", "Python", "py"),
    TargetLanguage("java", "Java", "java"),
    TargetLanguage("csharp", "C#", "cs"),
    TargetLanguage("go", "Go", "go"),
    TargetLanguage("ruby", "Ruby", "rb"),
    TargetLanguage("php", "PHP", "php"),
]

_BY_ID: Dict[str, TargetLanguage] = {lang.id: lang for lang in SUPPORTED_LANGUAGES}

DEFAULT_EXTENSION = "txt"


def display_name(language: str) -> str:
    """Human-readable name used in prompts, e.g. ``csharp`` -> ``C#``."""
    lang = _BY_ID.get(language.lower())
    return lang.name if lang else language


def file_extension(language: str) -> str:
    lang = _BY_ID.get(language.lower())
    return lang.extension if lang else DEFAULT_EXTENSION


def sdk_filename(language: str) -> str:
    return f"generated-sdk.{file_extension(language)}"
