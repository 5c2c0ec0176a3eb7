"""
Public entry points.

`Processor.include_file` splices includes and leaves Markdown unrendered,
`Processor.render_file` produces the final HTML document. Both are
coroutines: the root file is read off the event loop, the tree transform
itself runs synchronously.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .cache.file_cache import FileCache
from .config.model import ProcessorConfig
from .context import IncludeContext, Mode, SourceFormat
from .dom.fragment import FragmentExtractor
from .dom.html import HTML, RAW, escape_text, parse_html, serialize
from .dom.nodes import Node
from .dom.trim import trim
from .include.resolver import IncludeResolver
from .markdown.renderer import MarkdownRenderer
from .paths import absolute
from .render.renderer import ContentRenderer

logger = logging.getLogger(__name__)

Callback = Callable[[Optional[BaseException], Optional[str]], None]


class Processor:
    """
    Include/render processor.

    Holds the file cache, the dynamic include log and the warning log; all
    three live as long as the instance or until `reset()`.
    """

    def __init__(self, config: Optional[ProcessorConfig] = None):
        self.config = config or ProcessorConfig()
        self.file_cache = FileCache(encoding=self.config.encoding)
        self.markdown = MarkdownRenderer(self.config.markdown)
        self.extractor = FragmentExtractor()
        self._dynamic_include_src: List[str] = []
        self._warnings: List[str] = []

    # ======= Public API =======

    async def include_file(self, file: Path | str, callback: Optional[Callback] = None) -> str:
        """
        Resolve includes of `file` without rendering Markdown.

        Args:
            file: Root .md or .html file
            callback: Called once with (error, output)

        Returns:
            Serialized tree, Markdown left as source text

        Raises:
            UnsupportedExtension, IncludeNotFound, IncludeCycle, ParseError
        """
        return await self._run(Path(file), Mode.INCLUDE, callback)

    async def render_file(self, file: Path | str, callback: Optional[Callback] = None) -> str:
        """
        Resolve includes of `file` and render it to final HTML.

        Args:
            file: Root .md or .html file
            callback: Called once with (error, output)

        Returns:
            Rendered HTML without comments or blank text nodes

        Raises:
            UnsupportedExtension, IncludeNotFound, IncludeCycle, ParseError
        """
        return await self._run(Path(file), Mode.RENDER, callback)

    def get_dynamic_include_src(self) -> List[str]:
        """Sources of dynamic includes seen by render runs, in order."""
        return list(self._dynamic_include_src)

    def get_warnings(self) -> List[str]:
        return list(self._warnings)

    def reset(self) -> None:
        """Forget cached files, recorded dynamic sources and warnings."""
        self.file_cache.clear()
        self._dynamic_include_src.clear()
        self._warnings.clear()

    # ======= Internal methods =======

    async def _run(self, file: Path, mode: Mode, callback: Optional[Callback]) -> str:
        try:
            # extension is validated before anything is read
            context = IncludeContext.for_root(file, mode)
            text = await asyncio.to_thread(self.file_cache.get, context.current_file)
            output = self._transform(text, context)
        except Exception as e:
            logger.debug(f"{mode.value} of {file} failed: {e}")
            if callback is not None:
                callback(e, None)
            raise
        if callback is not None:
            callback(None, output)
        return output

    def _transform(self, text: str, context: IncludeContext) -> str:
        root = context.current_file
        if context.mode is Mode.RENDER and context.source_format is SourceFormat.MARKDOWN:
            text = self.markdown.render(text)
        nodes = parse_html(text, source=root)
        if context.mode is Mode.INCLUDE and context.source_format is SourceFormat.HTML:
            nodes = escape_text(nodes)

        resolver = IncludeResolver(
            self.file_cache,
            self.markdown,
            self.extractor,
            on_warning=self._warnings.append,
        )
        nodes = resolver.resolve_all(nodes, context)

        if context.mode is Mode.INCLUDE:
            return serialize(nodes, formatter=RAW)

        nodes = self._render_pass(nodes, context)
        return serialize(nodes, formatter=HTML)

    def _render_pass(self, nodes: Tuple[Node, ...], context: IncludeContext) -> Tuple[Node, ...]:
        renderer = ContentRenderer(
            self.markdown,
            dynamic_suffix=self.config.dynamic_suffix,
            dynamic_sources=self._dynamic_include_src,
        )
        return trim(renderer.parse_all(nodes, context))


def create_processor(config_path: Optional[Path] = None) -> Processor:
    """Processor configured from a docsplice.yaml file (defaults if None)."""
    from .config.load import load_config
    config = load_config(absolute(config_path) if config_path is not None else None)
    return Processor(config)


__all__ = ["Processor", "create_processor", "Callback"]
