"""A small shader preprocessor that expands ``#include "name"`` directives."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "PreprocessorConfig",
    "IncludeNotFoundError",
    "ShaderSyntaxError",
    "preprocess_shader",
]

_DIRECTIVE = "#include"


class IncludeNotFoundError(LookupError):
    """An ``#include`` names a file that is not in the includes list."""

    def __init__(self, filename: str) -> None:
        super().__init__(f'Include file {filename} in not on "includes" list')
        self.filename = filename


class ShaderSyntaxError(ValueError):
    """An ``#include`` directive is malformed."""


@dataclass
class PreprocessorConfig:
    """Include files available to the preprocessor, as (filename, content) pairs."""

    includes: list[tuple[str, str]] = field(default_factory=list)


def preprocess_shader(source: str, config: PreprocessorConfig) -> str:
    """Replace each ``#include "file"`` directive with that file's content."""
    result = source
    position = 0
    while True:
        start = result.find(_DIRECTIVE, position)
        if start < 0:
            return result

        cursor = start + len(_DIRECTIVE)
        while cursor < len(result) and result[cursor] == " ":
            cursor += 1
        if cursor >= len(result) or result[cursor] != '"':
            raise ShaderSyntaxError(
                f"expected '\"' after #include at offset {start}"
            )
        name_start = cursor + 1
        name_end = result.find('"', name_start)
        if name_end < 0:
            raise ShaderSyntaxError(
                f"unterminated include filename at offset {name_start}"
            )
        filename = result[name_start:name_end]

        content = next(
            (text for name, text in config.includes if name == filename), None
        )
        if content is None:
            raise IncludeNotFoundError(filename)

        result = result[:start] + content + result[name_end + 1 :]
        position = name_end