"""
Plain text dump exporter.

Writes each printed object followed by a separator line, with an optional
title line at the top.
"""

import logging
from typing import Any, Dict, Optional

from ..config import PrintingConfig
from ..exceptions import UnexpectedCycleError
from .base import BaseDumpExporter

logger = logging.getLogger(__name__)

CYCLE_POLICIES = ("raise", "skip", "marker")


class TextDumpExporter(BaseDumpExporter):
    """
    Text format dump exporter.

    Options:
        - title: Line written before the first object (default: none)
        - separator: Line written after each object (default: 40 dashes)
        - on_cycle: What to do when an object has an unexpected cycle:
          'raise' (default), 'skip' or 'marker'
    """

    def __init__(
        self,
        output_path: str,
        config: Optional[PrintingConfig] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(output_path, config, options)

        self.title = self.options.get("title")
        self.separator = self.options.get("separator", "-" * 40)
        self.on_cycle = self.options.get("on_cycle", "raise")
        if self.on_cycle not in CYCLE_POLICIES:
            raise ValueError(
                f"on_cycle must be one of {', '.join(CYCLE_POLICIES)}, got {self.on_cycle!r}"
            )

        self.serializer = self.config.serializer()

    async def write_header(self) -> None:
        if self.title:
            await self.write_text(f"{self.title}{self.newline}")

    async def write_object(self, obj: Any) -> None:
        result = self.serializer.try_serialize(obj)

        if result.ok:
            text = result.unwrap()
        elif self.on_cycle == "marker":
            self.stats.errors.append(result.error)
            text = result.text_or(self._cycle_marker)
        elif self.on_cycle == "skip":
            logger.warning(f"Skipping {type(obj).__name__}: {result.error}")
            self.stats.errors.append(result.error)
            self.stats.objects_skipped += 1
            return
        else:
            logger.error(f"Dump to {self.output_path} failed: {result.error}")
            result.unwrap()

        await self.write_text(text)
        await self.write_text(f"{self.separator}{self.newline}")
        self.stats.objects_written += 1

    async def write_footer(self) -> None:
        pass

    def _cycle_marker(self, error: UnexpectedCycleError) -> str:
        return f"<unexpected cycle: {error.value_type.__name__}>{self.newline}"
