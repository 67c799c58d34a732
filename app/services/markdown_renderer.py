from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

from app import config


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Markdown rendering switches, passed explicitly to every render call.

    Raw HTML in post sources is always escaped, whatever the options say.
    """

    tables: bool = True
    strikethrough: bool = True
    task_lists: bool = True
    typographer: bool = False
    default_code_language: Optional[str] = None


DEFAULT_RENDER_OPTIONS = RenderOptions()


def options_from_config() -> RenderOptions:
    return RenderOptions(default_code_language=config.DEFAULT_CODE_LANGUAGE)


@lru_cache(maxsize=16)
def _build_parser(options: RenderOptions) -> MarkdownIt:
    logger.debug("Building markdown parser for %s", options)
    # html=False escapes inline and block HTML; validateLink drops
    # javascript:, vbscript:, file: and non-image data: URLs.
    parser = MarkdownIt(
        "commonmark",
        {"html": False, "langPrefix": "language-", "typographer": options.typographer},
    )
    if options.tables:
        parser.enable("table")
    if options.strikethrough:
        parser.enable("strikethrough")
    if options.typographer:
        parser.enable(["replacements", "smartquotes"])
    if options.task_lists:
        parser.use(tasklists_plugin)
    return parser


def render_markdown(raw: str, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
    """Convert a markdown body to sanitized HTML.

    Fenced code blocks get a ``language-<lang>`` class for client-side
    highlighting; fences without an info string fall back to
    ``options.default_code_language`` when it is set.
    """
    parser = _build_parser(options)
    env: dict = {}
    tokens = parser.parse(raw, env)

    if options.default_code_language:
        for token in tokens:
            if token.type == "fence" and not token.info.strip():
                token.info = options.default_code_language

    return parser.renderer.render(tokens, parser.options, env)
